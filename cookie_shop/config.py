import os
from datetime import timedelta


class Config:
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    ENV = os.getenv("FLASK_ENV", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-change-me")

    # JWT
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "dev-secret-change-me")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(minutes=15)
    JWT_REFRESH_TOKEN_EXPIRES = timedelta(days=30)

    # refresh token cookie, readable by the admin client script
    REFRESH_COOKIE_NAME = "refreshToken"
    REFRESH_COOKIE_MAX_AGE = 30 * 24 * 60 * 60
    REFRESH_COOKIE_SECURE = ENV == "production"

    # single admin account
    ADMIN_PHONE = os.environ.get("ADMIN_PHONE", "")
    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD") or "amir1382"
    ADMIN_EMAIL = os.environ.get("ADMIN_EMAIL", "admin@example.com")
    BCRYPT_LOG_ROUNDS = int(os.environ.get("BCRYPT_LOG_ROUNDS", "10"))

    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    @staticmethod
    def init_app(app):
        if app.config.get("SQLALCHEMY_DATABASE_URI"):
            return
        if not os.getenv("DATABASE_URL"):
            os.makedirs(app.instance_path, exist_ok=True)
            app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{os.path.join(app.instance_path, 'cookie-shop.db')}"
        else:
            app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv("DATABASE_URL")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "test-secret"
    ADMIN_PHONE = "09337932893"
    ADMIN_PASSWORD = "amir1382"
    BCRYPT_LOG_ROUNDS = 4
    REFRESH_COOKIE_SECURE = False
    LOG_LEVEL = "WARNING"
