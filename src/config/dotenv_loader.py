import os
import sys

from dotenv import load_dotenv


def get_env_path():
    if getattr(sys, "frozen", False):
        base_path = sys._MEIPASS
    else:
        base_path = os.getcwd()
        fallback = os.path.dirname(os.path.abspath(__file__))

        if not os.path.exists(os.path.join(base_path, "development.env")):
            base_path = fallback

    return os.path.join(base_path, "development.env")


def load_default_env():
    if "ENV_FILE" not in os.environ:
        load_dotenv(get_env_path())
    else:
        load_dotenv(os.getenv("ENV_FILE"))


def get_boolean_from_env(env_var_name, default=None):
    env_var_str = os.getenv(env_var_name)

    if env_var_str is None or not env_var_str.strip():
        return default
    return env_var_str.strip().lower() in ["true", "yes", "1"]


def get_list_from_env(env_var_name, default=None):
    env_var_str = os.getenv(env_var_name)

    if env_var_str is None or not env_var_str.strip():
        return default
    return [item.strip() for item in env_var_str.split(",") if item.strip()]
