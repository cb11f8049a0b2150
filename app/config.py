import os


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev_secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///payroll.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Create the employees table on startup (flask db upgrade is the alternative)
    AUTO_CREATE_TABLES = _flag("AUTO_CREATE_TABLES", "true")

    # Employee numbers
    EMPLOYEE_NUMBER_MAX_ATTEMPTS = int(os.getenv("EMPLOYEE_NUMBER_MAX_ATTEMPTS", "5"))
    REGENERATE_EMPLOYEE_NUMBER_ON_UPDATE = _flag("REGENERATE_EMPLOYEE_NUMBER_ON_UPDATE", "true")

    # Web client runs on another origin
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class Development(Config):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()


class Production(Config):
    DEBUG = False


class Testing(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    AUTO_CREATE_TABLES = True
    REGENERATE_EMPLOYEE_NUMBER_ON_UPDATE = True
