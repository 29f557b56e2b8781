"""Runtime configuration and datasource URL handling."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

ENV_PREFIX = "DBDOC_"
DEFAULT_ODBC_DRIVER = "MySQL ODBC 8.0 Unicode Driver"


class InvalidConfiguration(ValueError):
    """Raised when the datasource configuration cannot be used."""


def resolve_schema_name(url: str) -> str:
    """Return the schema segment of a datasource URL.

    Parameters
    ----------
    url : str
        Connection URL, e.g. ``jdbc:mariadb://localhost:3306/my_db?useUnicode=true``.

    Returns
    -------
    str
        The text after the last ``/`` once query parameters are removed.

    Raises
    ------
    InvalidConfiguration
        If there is no ``/`` or nothing follows the last one.
    """
    base = url.split("?", 1)[0]
    slash = base.rfind("/")
    if slash == -1 or slash == len(base) - 1:
        raise InvalidConfiguration(f"Invalid DataSource URL: {base}")
    return base[slash + 1 :]


class Settings(BaseModel):
    """Datasource and logging settings."""

    datasource_url: str = Field(description="scheme://host:port/schemaName[?params]")
    username: str = ""
    password: str = ""
    odbc_driver: str = DEFAULT_ODBC_DRIVER
    log_level: str = "INFO"

    @property
    def schema_name(self) -> str:
        return resolve_schema_name(self.datasource_url)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> Settings:
        """Build settings from ``DBDOC_*`` environment variables.

        Values from ``env_file`` (or a ``.env`` found from the working
        directory) fill in variables that are not already set.
        """
        load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True), override=False)

        def pick(name: str, default: str | None = None) -> str | None:
            return os.getenv(ENV_PREFIX + name) or default

        url = pick("DATASOURCE_URL")
        if not url:
            raise InvalidConfiguration(f"{ENV_PREFIX}DATASOURCE_URL is not set")
        return cls(
            datasource_url=url,
            username=pick("DATASOURCE_USERNAME", ""),
            password=pick("DATASOURCE_PASSWORD", ""),
            odbc_driver=pick("ODBC_DRIVER", DEFAULT_ODBC_DRIVER),
            log_level=pick("LOG_LEVEL", "INFO").upper(),
        )
