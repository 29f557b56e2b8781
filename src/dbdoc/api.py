"""FastAPI service exposing the schema workbook download."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Response

from dbdoc.config import Settings
from dbdoc.service import generate_excel

log = logging.getLogger("api")

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
DOWNLOAD_FILENAME = "DB_Schema.xlsx"


def get_settings() -> Settings:
    return Settings.from_env()


def create_app() -> FastAPI:
    app = FastAPI(
        title="DB Schema Export API",
        description="Download the database table definitions as an Excel workbook",
        version="1.0.0",
    )

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "dbdoc"}

    @app.get("/api/db-schema/excel")
    def download_db_schema_excel(settings: Settings = Depends(get_settings)) -> Response:
        """Stream the table definition workbook as an attachment."""
        data = generate_excel(settings)
        log.info("Sending %s (%d bytes)", DOWNLOAD_FILENAME, len(data))
        return Response(
            content=data,
            media_type=XLSX_MEDIA_TYPE,
            headers={"Content-Disposition": f'attachment; filename="{DOWNLOAD_FILENAME}"'},
        )

    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
