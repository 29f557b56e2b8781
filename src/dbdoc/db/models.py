"""Data models for catalog column metadata."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

AUTO_INCREMENT_MARKER = "auto_increment"


class ColumnRecord(BaseModel):
    """One row of information_schema column metadata."""

    model_config = ConfigDict(frozen=True)

    table_name: str = Field(min_length=1, description="Table the column belongs to")
    table_comment: str = Field(default="", description="Table comment, shared by all its columns")
    column_name: str = Field(min_length=1)
    column_type: str = Field(description="Full column type, e.g. varchar(45)")
    is_nullable: str = Field(description="YES or NO")
    column_key: str = Field(default="", description="Key flag: PRI, UNI, MUL or empty")
    extra: str | None = Field(default=None, description="Extra attributes such as auto_increment")
    column_default: str | None = None
    column_comment: str | None = None

    @field_validator("table_comment", "column_key", mode="before")
    @classmethod
    def _none_as_empty(cls, value: str | None) -> str:
        return "" if value is None else value

    @property
    def auto_increment(self) -> bool:
        """True when the extra attributes mark the column as auto-increment."""
        return bool(self.extra) and AUTO_INCREMENT_MARKER in self.extra
