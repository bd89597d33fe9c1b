APP_NAME = "todo-api"
__version__ = "0.1.0"
