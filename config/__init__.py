import os

def get_settings_module() -> str:
    # Pick the environment from APP_ENV, defaulting to 'development'
    env = os.getenv("APP_ENV", "development").lower()

    # 1. Production
    if env in {"prod", "production"}:
        return "config.production"
    
    # 2. Testing
    if env in {"test", "testing"}:
        return "config.testing"
    
    # 3. Everything else is development
    return "config.development"
