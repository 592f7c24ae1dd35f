"""邮件状态 SQLAlchemy 数据模型"""

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """SQLAlchemy 声明式基类"""
    pass


class MailStateModel(Base):
    """
    邮件状态数据库模型

    对应外部创建的 mailstate(fmt TEXT, value TEXT) 表。
    表本身没有主键，这里映射 SQLite 隐式的 rowid 供 ORM 使用。
    """

    __tablename__ = "mailstate"

    rowid: Mapped[int] = mapped_column(Integer, primary_key=True)

    # 格式标签
    format: Mapped[Optional[str]] = mapped_column("fmt", Text, nullable=True)

    # 缓存的状态值
    value: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        value_display = (self.value[:30] + "...") if self.value and len(self.value) > 30 else (self.value or "")
        return f"<MailStateModel(fmt={self.format}, value={value_display})>"
