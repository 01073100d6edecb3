"""Tests for loading roles from a spreadsheet."""

from __future__ import annotations

from pathlib import Path

import pytest
from openpyxl import Workbook

from backoffice.infrastructure.database import SessionLocal
from backoffice.infrastructure.models import RoleModel
from backoffice.infrastructure.seeders import role_seeder
from backoffice.infrastructure.spreadsheet import (
    coerce_bool,
    convert_excel_to_records,
    transform_records,
)


def _write_workbook(path: Path, rows: list[list]) -> Path:
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = "roles"
    for row in rows:
        worksheet.append(row)
    workbook.save(path)
    return path


@pytest.fixture()
def roles_file(tmp_path: Path) -> Path:
    return _write_workbook(
        tmp_path / "roles.xlsx",
        [
            [" Code ", "Name", "Active"],
            ["ADMIN", "Administrator", True],
            ["STAFF", " Staff ", "no"],
            [None, None, None],
            ["STUDENT", "Student", None],
        ],
    )


def _roles() -> list[RoleModel]:
    with SessionLocal() as session:
        return session.query(RoleModel).order_by(RoleModel.id).all()


def test_convert_excel_normalizes_headers_and_drops_blank_rows(roles_file: Path) -> None:
    records = convert_excel_to_records(roles_file)

    assert records == [
        {"code": "ADMIN", "name": "Administrator", "active": True},
        {"code": "STAFF", "name": "Staff", "active": "no"},
        {"code": "STUDENT", "name": "Student", "active": None},
    ]


def test_transform_records_coerces_active() -> None:
    records = transform_records(
        [
            {"code": "A", "name": "A", "active": "yes"},
            {"code": "B", "name": "B", "active": 0},
            {"code": "C", "name": "C", "active": None},
        ]
    )

    assert [record["active"] for record in records] == [True, False, True]


def test_coerce_bool_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        coerce_bool("maybe", default=True)


def test_up_inserts_every_role(roles_file: Path) -> None:
    with SessionLocal() as session:
        inserted = role_seeder.up(session, roles_file)

    assert inserted == 3
    roles = _roles()
    assert [(role.code, role.name, role.active) for role in roles] == [
        ("ADMIN", "Administrator", True),
        ("STAFF", "Staff", False),
        ("STUDENT", "Student", True),
    ]
    assert all(role.created_on is not None and role.updated_on is not None for role in roles)


def test_up_aborts_whole_seed_on_error(tmp_path: Path, caplog) -> None:
    broken = _write_workbook(
        tmp_path / "broken.xlsx",
        [["code", "name", "active"], ["ADMIN", "Administrator", 1], ["STAFF", "Staff", "perhaps"]],
    )

    with caplog.at_level("ERROR"), SessionLocal() as session:
        inserted = role_seeder.up(session, broken)

    assert inserted == 0
    assert _roles() == []
    assert "Error seeding roles" in caplog.text


def test_up_with_missing_file_is_logged(tmp_path: Path, caplog) -> None:
    with caplog.at_level("ERROR"), SessionLocal() as session:
        inserted = role_seeder.up(session, tmp_path / "missing.xlsx")

    assert inserted == 0
    assert "Error seeding roles" in caplog.text


def test_down_removes_all_roles(roles_file: Path) -> None:
    with SessionLocal() as session:
        role_seeder.up(session, roles_file)
        deleted = role_seeder.down(session)

    assert deleted == 3
    assert _roles() == []
