from __future__ import annotations

import datetime as dt

from sqlalchemy import Date, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from student_management.db.base_class import Base


class Student(Base):
    __tablename__ = "students"
    # ids removidos não são reaproveitados no SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nome: Mapped[str] = mapped_column(String(100), nullable=False)
    idade: Mapped[int] = mapped_column(Integer, nullable=False)
    serie: Mapped[int] = mapped_column(Integer, nullable=False)
    nota_media: Mapped[float] = mapped_column(Float, nullable=False)
    endereco: Mapped[str] = mapped_column(String(200), nullable=False)
    nome_pai: Mapped[str] = mapped_column(String(100), nullable=False)
    nome_mae: Mapped[str] = mapped_column(String(100), nullable=False)
    data_nascimento: Mapped[dt.date] = mapped_column(Date, nullable=False)

    # Campos substituídos por inteiro no PUT (id nunca muda)
    EDITABLE_FIELDS = (
        "nome",
        "idade",
        "serie",
        "nota_media",
        "endereco",
        "nome_pai",
        "nome_mae",
        "data_nascimento",
    )
