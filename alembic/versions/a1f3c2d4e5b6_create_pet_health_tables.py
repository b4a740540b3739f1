"""create pet health tables

Revision ID: a1f3c2d4e5b6
Revises:
Create Date: 2026-01-05
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "a1f3c2d4e5b6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


species_enum = sa.Enum("dog", "cat", "bird", "rabbit", "other", name="species")
unit_enum = sa.Enum("lbs", "kg", name="weightunit")
category_enum = sa.Enum("vet_visit", "medication", "vaccination", "appointment", name="eventcategory")


def upgrade() -> None:
    op.create_table(
        "pets",
        sa.Column("pet_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("breed", sa.String(100), nullable=False),
        sa.Column("species", species_enum, nullable=False),
        sa.Column("date_of_birth", sa.Date()),
        sa.Column("avatar_url", sa.String(255)),
        sa.Column("color", sa.String(50)),
        sa.Column("gender", sa.String(20)),
        sa.Column("microchip_number", sa.String(50)),
        sa.Column("microchip_location", sa.String(100)),
        sa.Column("vet_name", sa.String(100)),
        sa.Column("father_name", sa.String(100)),
        sa.Column("mother_name", sa.String(100)),
        sa.Column("hair_length", sa.String(50)),
        sa.Column("desexed", sa.String(20)),
        sa.Column("food_brand", sa.String(100)),
        sa.Column("per_meal_amount", sa.String(50)),
        sa.Column("meals_per_day", sa.String(20)),
        sa.Column("yearly_vaccination_date", sa.Date()),
        sa.Column("food_bowl_colour", sa.String(50)),
        sa.Column("traits", sa.Text()),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        "events",
        sa.Column("event_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("category", category_enum, nullable=False),
        sa.Column("notes", sa.Text()),
        sa.Column("event_date", sa.Date(), nullable=False),
        sa.Column("reminder_date", sa.Date()),
        sa.Column("location", sa.String(200)),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        "weight_entries",
        sa.Column("entry_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "pet_id",
            sa.Integer(),
            sa.ForeignKey("pets.pet_id", name="fk_weight_entries_pet_id_pets", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("unit", unit_enum, nullable=False),
        sa.Column("recorded_at", sa.Date(), nullable=False),
    )
    op.create_index("ix_weight_entries_pet_id", "weight_entries", ["pet_id"])

    op.create_table(
        "pet_events",
        sa.Column("link_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "pet_id",
            sa.Integer(),
            sa.ForeignKey("pets.pet_id", name="fk_pet_events_pet_id_pets", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "event_id",
            sa.Integer(),
            sa.ForeignKey("events.event_id", name="fk_pet_events_event_id_events", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    op.create_index("ix_pet_events_pet_id", "pet_events", ["pet_id"])
    op.create_index("ix_pet_events_event_id", "pet_events", ["event_id"])

    # 접종/투약: 반려동물 삭제 시 CASCADE, 원본 이벤트 삭제 시 SET NULL
    op.create_table(
        "vaccinations",
        sa.Column("vaccination_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "pet_id",
            sa.Integer(),
            sa.ForeignKey("pets.pet_id", name="fk_vaccinations_pet_id_pets", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("date_administered", sa.Date(), nullable=False),
        sa.Column("next_due_date", sa.Date()),
        sa.Column("veterinarian", sa.String(100)),
        sa.Column("notes", sa.Text()),
        sa.Column(
            "source_event_id",
            sa.Integer(),
            sa.ForeignKey("events.event_id", name="fk_vaccinations_source_event_id_events", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index("ix_vaccinations_pet_id", "vaccinations", ["pet_id"])

    op.create_table(
        "medications",
        sa.Column("medication_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "pet_id",
            sa.Integer(),
            sa.ForeignKey("pets.pet_id", name="fk_medications_pet_id_pets", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("dosage", sa.String(100)),
        sa.Column("frequency", sa.String(100)),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date()),
        sa.Column("prescribed_by", sa.String(100)),
        sa.Column("notes", sa.Text()),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            "source_event_id",
            sa.Integer(),
            sa.ForeignKey("events.event_id", name="fk_medications_source_event_id_events", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index("ix_medications_pet_id", "medications", ["pet_id"])


def downgrade() -> None:
    op.drop_index("ix_medications_pet_id", table_name="medications")
    op.drop_table("medications")
    op.drop_index("ix_vaccinations_pet_id", table_name="vaccinations")
    op.drop_table("vaccinations")
    op.drop_index("ix_pet_events_event_id", table_name="pet_events")
    op.drop_index("ix_pet_events_pet_id", table_name="pet_events")
    op.drop_table("pet_events")
    op.drop_index("ix_weight_entries_pet_id", table_name="weight_entries")
    op.drop_table("weight_entries")
    op.drop_table("events")
    op.drop_table("pets")

    # PostgreSQL 등 네이티브 ENUM 타입 정리 (MySQL/SQLite는 no-op)
    bind = op.get_bind()
    category_enum.drop(bind, checkfirst=True)
    unit_enum.drop(bind, checkfirst=True)
    species_enum.drop(bind, checkfirst=True)
