import pytest

from savory.errors import InvalidConfigurationError
from savory.shelf_life.water_activity import (
    Packaging,
    ProductType,
    RiskLevel,
    assess_water_activity,
    aw_category,
)


def test_dry_product_with_high_ph():
    result = assess_water_activity(aw=0.4, ph=7.0, temperature_c=20.0)
    assert result.aw_category.name == "dry"
    assert result.risk_level is RiskLevel.LOW
    assert result.shelf_life_days == pytest.approx(126.0)
    assert result.predicted_days == 126
    assert "High pH favours bacterial growth" in result.risk_factors


def test_vacuum_packed_dried_product():
    result = assess_water_activity(
        aw=0.45,
        ph=5.5,
        temperature_c=25.0,
        packaging="vacuum",
        product_type="dried",
    )
    assert result.predicted_days == 405
    assert result.risk_factors == ()
    assert result.recommendations == ()
    assert result.predicted_weeks == pytest.approx(405 / 7)
    assert result.predicted_months == pytest.approx(13.5)


def test_risk_level_ignores_favourable_hurdles():
    result = assess_water_activity(
        aw=0.9,
        ph=4.0,
        temperature_c=2.0,
        preservatives=True,
        packaging=Packaging.NITROGEN,
        product_type=ProductType.FROZEN,
    )
    assert result.risk_level is RiskLevel.VERY_HIGH
    assert result.risk_label == "Very high"
    assert result.shelf_life_days == pytest.approx(7 * 1.5 * 2 * 1.3 * 2 * 3)
    assert "Lower water activity below 0.6 to extend shelf life" in result.recommendations


@pytest.mark.parametrize(
    "aw,level,base",
    [
        (0.0, RiskLevel.VERY_LOW, 365),
        (0.29, RiskLevel.VERY_LOW, 365),
        (0.3, RiskLevel.LOW, 180),
        (0.55, RiskLevel.LOW, 90),
        (0.6, RiskLevel.MEDIUM, 30),
        (0.8, RiskLevel.HIGH, 14),
        (0.85, RiskLevel.VERY_HIGH, 7),
        (1.0, RiskLevel.VERY_HIGH, 7),
    ],
)
def test_base_shelf_life_brackets(aw, level, base):
    result = assess_water_activity(aw=aw, ph=5.5, temperature_c=20.0)
    assert result.risk_level is level
    assert result.shelf_life_days == pytest.approx(base)


def test_rounds_half_days_up():
    result = assess_water_activity(aw=0.75, ph=3.0, temperature_c=20.0, product_type="fresh")
    assert result.shelf_life_days == 10.5
    assert result.predicted_days == 11


def test_warm_storage_adds_risk_and_cooling_advice():
    result = assess_water_activity(aw=0.65, ph=5.5, temperature_c=30.0)
    assert result.shelf_life_days == pytest.approx(15.0)
    assert "High storage temperature accelerates deterioration" in result.risk_factors
    assert "Store below 25 °C" in result.recommendations
    assert "Use vacuum or modified-atmosphere packaging to extend shelf life" in result.recommendations


def test_frozen_products_skip_cooling_advice():
    result = assess_water_activity(
        aw=0.65, ph=5.5, temperature_c=28.0, product_type="frozen", packaging="vacuum"
    )
    assert "Store below 25 °C" not in result.recommendations


@pytest.mark.parametrize(
    "aw,name",
    [(0.1, "very dry"), (0.4, "dry"), (0.55, "semi-dry"), (0.65, "slightly moist"),
     (0.8, "moderately moist"), (0.9, "very moist"), (0.97, "wet")],
)
def test_aw_categories(aw, name):
    assert aw_category(aw).name == name


@pytest.mark.parametrize("aw", [-0.1, 1.2, float("nan")])
def test_water_activity_out_of_range_rejected(aw):
    with pytest.raises(InvalidConfigurationError):
        assess_water_activity(aw=aw, ph=5.5, temperature_c=20.0)


def test_unknown_packaging_rejected():
    with pytest.raises(InvalidConfigurationError, match="packaging"):
        assess_water_activity(aw=0.5, ph=5.5, temperature_c=20.0, packaging="tin can")
    with pytest.raises(InvalidConfigurationError, match="product type"):
        assess_water_activity(aw=0.5, ph=5.5, temperature_c=20.0, product_type="smoked")
