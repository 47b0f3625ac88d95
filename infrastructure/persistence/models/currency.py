from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
	pass


class KeyValueEntryDB(Base):
	__tablename__ = 'kv_entries'

	key: Mapped[str] = mapped_column(String(255), primary_key=True)
	value: Mapped[str] = mapped_column(Text, nullable=False)
	updated_at: Mapped[datetime] = mapped_column(
		DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
	)
