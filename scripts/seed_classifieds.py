#!/usr/bin/env python3
"""
Seed the inventory tables with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Realism-lite: prices fall with age and rise with make tier

Usage:
    python scripts/seed_classifieds.py
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from car_dealer.domain.classified import (
    BodyType,
    ClassifiedStatus,
    Colour,
    CurrencyCode,
    FuelType,
    OdoUnit,
    Transmission,
    ULEZCompliance,
)
from car_dealer.infra.db.models import (
    ClassifiedRow,
    ImageRow,
    MakeRow,
    ModelRow,
    ModelVariantRow,
)
from car_dealer.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_CLASSIFIEDS = 40
CURRENT_YEAR = 2026
PLACEHOLDER_IMAGE = (
    "https://car-dealer-website.s3.eu-west-1.amazonaws.com/"
    "next-s3-uploads/stock/classified-placeholder.jpeg"
)


# ==============================================================================
# UK Market Taxonomy
# ==============================================================================

# Base price in pence for a new car, by tier
TIER_BASE_PRICE = {
    "economy": (1_500_000, 2_500_000),
    "mid_range": (2_500_000, 4_000_000),
    "premium": (4_000_000, 8_000_000),
}

MAKES = {
    "Ford": ("economy", {"Fiesta": BodyType.HATCHBACK, "Focus": BodyType.HATCHBACK, "Kuga": BodyType.SUV}),
    "Vauxhall": ("economy", {"Corsa": BodyType.HATCHBACK, "Astra": BodyType.HATCHBACK}),
    "Volkswagen": ("mid_range", {"Golf": BodyType.HATCHBACK, "Passat": BodyType.WAGON, "Tiguan": BodyType.SUV}),
    "Toyota": ("mid_range", {"Yaris": BodyType.HATCHBACK, "Corolla": BodyType.SEDAN, "RAV4": BodyType.SUV}),
    "BMW": ("premium", {"3 Series": BodyType.SEDAN, "4 Series": BodyType.COUPE, "X5": BodyType.SUV}),
    "Audi": ("premium", {"A4": BodyType.SEDAN, "A5": BodyType.CONVERTIBLE, "Q5": BodyType.SUV}),
}

VARIANTS = ["SE", "Sport", "Titanium", "M Sport", "S line"]


# ==============================================================================
# Seed Generation
# ==============================================================================


def calculate_price(tier: str, year: int) -> int:
    """
    Price in pence: random base within the tier, ~10% depreciation per
    year capped at 70%, rounded to the nearest £100.
    """
    base_min, base_max = TIER_BASE_PRICE[tier]
    base_price = random.randint(base_min, base_max)

    years_old = max(0, CURRENT_YEAR - year)
    depreciation = min(0.10 * years_old, 0.70)
    price = base_price * (1 - depreciation) * random.uniform(0.9, 1.1)

    return max(int(round(price / 10_000)) * 10_000, 300_000)


def seed_taxonomy(session) -> list[tuple[MakeRow, ModelRow, list[ModelVariantRow], str, BodyType]]:
    entries = []
    for make_name, (tier, models) in MAKES.items():
        make = MakeRow(name=make_name)
        session.add(make)
        for model_name, body_type in models.items():
            model = ModelRow(name=model_name, make=make)
            variants = [
                ModelVariantRow(name=name, model=model, year_start=2015, year_end=CURRENT_YEAR)
                for name in random.sample(VARIANTS, k=2)
            ]
            session.add(model)
            session.add_all(variants)
            entries.append((make, model, variants, tier, body_type))
    session.flush()
    return entries


def generate_classified(
    make: MakeRow,
    model: ModelRow,
    variants: list[ModelVariantRow],
    tier: str,
    body_type: BodyType,
) -> ClassifiedRow:
    year = random.choices(
        range(2015, CURRENT_YEAR + 1),
        weights=[1, 1, 2, 2, 3, 3, 4, 5, 6, 7, 7, 6],  # Favour newer years
        k=1,
    )[0]
    variant = random.choice(variants)
    years_old = CURRENT_YEAR - year
    odo_reading = random.randint(0, max(1_000, years_old * 9_000 + random.randint(0, 5_000)))

    fuel_type = random.choices(
        list(FuelType),
        weights=[6, 3, 1 if year < 2022 else 3, 1 if year < 2020 else 3],
        k=1,
    )[0]
    ulez_compliance = (
        ULEZCompliance.EXEMPT
        if fuel_type != FuelType.DIESEL or year >= 2016
        else ULEZCompliance.NON_EXEMPT
    )
    title = f"{year} {make.name} {model.name} {variant.name}"

    return ClassifiedRow(
        title=title,
        description=f"{title}, {odo_reading:,} miles, full service history.",
        year=year,
        price=calculate_price(tier, year),
        odo_reading=odo_reading,
        odo_unit=OdoUnit.MILES,
        currency=CurrencyCode.GBP,
        transmission=random.choice(list(Transmission)),
        fuel_type=fuel_type,
        body_type=body_type,
        colour=random.choice(list(Colour)),
        doors=2 if body_type in (BodyType.COUPE, BodyType.CONVERTIBLE) else 5,
        seats=4 if body_type in (BodyType.COUPE, BodyType.CONVERTIBLE) else 5,
        ulez_compliance=ulez_compliance,
        status=random.choices(list(ClassifiedStatus), weights=[8, 1, 1], k=1)[0],
        make_id=make.id,
        model_id=model.id,
        model_variant_id=variant.id,
        images=[ImageRow(src=PLACEHOLDER_IMAGE, alt=title)],
    )


def seed_classifieds(num_classifieds: int = NUM_CLASSIFIEDS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with taxonomy and classified data.

    Args:
        num_classifieds: Number of classifieds to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding database with {num_classifieds} classifieds (seed={seed})...")

    with get_session() as session:
        print("🗑️  Clearing existing inventory...")
        for row_type in (ImageRow, ClassifiedRow, ModelVariantRow, ModelRow, MakeRow):
            session.query(row_type).delete()

        taxonomy = seed_taxonomy(session)
        print(f"   Created {len(MAKES)} makes and {len(taxonomy)} models")

        classifieds = [
            generate_classified(*random.choice(taxonomy)) for _ in range(num_classifieds)
        ]
        session.add_all(classifieds)
        session.flush()

        live = sum(1 for c in classifieds if c.status == ClassifiedStatus.LIVE)
        print(f"✅ Seeded {len(classifieds)} classifieds ({live} live)")

        for i, classified in enumerate(classifieds[:5], 1):
            print(f"   {i}. {classified.title} - £{classified.price / 100:,.0f} ({classified.status.value})")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_classifieds()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
