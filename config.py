import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv
from os.path import join, dirname

logging.basicConfig(
    format='%(asctime)s - %(levelname)s - %(message)s',
    level=logging.INFO,
    handlers=[logging.StreamHandler(sys.stdout)]  # Only console output
)
dotenv_path = join(dirname(__file__), ".env")
load_dotenv(dotenv_path)


def read_key_from_file(file_path: Optional[str]) -> Optional[str]:
    """Reads the content of a file if the path exists."""
    if file_path and os.path.exists(file_path):
        with open(file_path, "r") as file:
            return file.read().strip()
    return None


def split_hosts(value: Optional[str]) -> list[str]:
    if not value:
        return ["*"]
    hosts = [host.strip() for host in value.split(",") if host.strip()]
    return hosts or ["*"]


class Config():
    MONGODB_URI: Optional[str] = os.getenv("MONGODB_URI")
    MONGO_DB: str = os.getenv("MONGO_DB", "contact-log-db")
    CONTACTS_COLLECTION: str = os.getenv("CONTACTS_COLLECTION", "contacts")
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8000")
    HOSTS: Optional[str] = os.getenv("ALLOWED_HOSTS")
    ALLOWED_HOSTS: list[str] = ["*"]
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    TIMEZONE: str = os.getenv("TIMEZONE", "UTC")
    ENV: Optional[str] = os.getenv("ENV")

    def __init__(self):
        """If the connection string is mounted as a secret file, read it."""
        if self.MONGODB_URI and os.path.exists(self.MONGODB_URI):
            self.MONGODB_URI = read_key_from_file(self.MONGODB_URI)
        self.ALLOWED_HOSTS = split_hosts(self.HOSTS)


config = Config()
