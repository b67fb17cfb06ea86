"""Example: drive the store and the leave workflow without any UI.

Goal: show that views stay thin; state and rules live in the store and services.
"""

import asyncio
import importlib
from datetime import date, timedelta

from config import get_settings_module

from src.hr_core.hr_core.auth.navigation import visible_nav_items
from src.hr_core.hr_core.container import build_container
from src.hr_core.hr_core.views.filters import employee_summary


async def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    store = container.store

    store.login(1)
    print("Menu:", [item.label for item in visible_nav_items(store.session)])

    draft = container.new_leave_draft()
    start = date.today() + timedelta(days=14)
    draft.update(start_date=start, end_date=start + timedelta(days=2))
    advisory = await draft.wait_for_advisory()
    print("Advisory:", advisory.text if advisory else "(none)")

    if draft.can_submit:
        request = draft.submit()
        print("Filed:", request)
    print(employee_summary(store))

    await container.close()


if __name__ == "__main__":
    asyncio.run(main())
