"""Tests for the zoom template catalog and width calculations."""

import pytest
from pydantic import ValidationError

from ganttline.zoom import (
    DEFAULT_CATALOG,
    MIN_TASK_WIDTH_PX,
    ZoomCatalog,
    ZoomState,
    ZoomTemplate,
    ZoomTemplateConfig,
    default_zoom_state,
    display_task_width,
    effective_day_width,
    get_config,
    is_task_visible,
    is_valid_factor,
    task_pixel_width,
)


class TestReferenceCatalog:
    """The shipped catalog carries the reference pixel parameters."""

    @pytest.mark.parametrize(
        ("template", "base", "unit_days", "max_factor"),
        [
            (ZoomTemplate.YEAR_QUARTER, 24.0, 90.0, 4.0),
            (ZoomTemplate.QUARTER_MONTH, 20.0, 30.0, 3.5),
            (ZoomTemplate.MONTH_WEEK, 18.0, 7.0, 3.0),
            (ZoomTemplate.WEEK_DAY, 12.0, 1.0, 2.5),
        ],
    )
    def test_reference_values(
        self, template: ZoomTemplate, base: float, unit_days: float, max_factor: float
    ) -> None:
        config = DEFAULT_CATALOG[template]

        assert config.template == template
        assert config.base_unit_width_px == base
        assert config.template_unit_days == unit_days
        assert config.min_factor == 1.0
        assert config.max_factor == max_factor

    def test_every_template_configured(self) -> None:
        assert set(DEFAULT_CATALOG) == set(ZoomTemplate)
        assert len(DEFAULT_CATALOG) == 4

    def test_default_is_quarter_month(self) -> None:
        assert DEFAULT_CATALOG.default_template == ZoomTemplate.QUARTER_MONTH
        assert default_zoom_state() == ZoomState(
            template=ZoomTemplate.QUARTER_MONTH, factor=1.0
        )

    def test_catalog_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_CATALOG[ZoomTemplate.WEEK_DAY] = DEFAULT_CATALOG.default  # type: ignore[index]

    def test_configs_are_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_CATALOG[ZoomTemplate.WEEK_DAY].base_unit_width_px = 99.0  # type: ignore[misc]


class TestCatalogLookup:
    def test_lookup_by_value(self) -> None:
        assert get_config("week_day").template == ZoomTemplate.WEEK_DAY

    def test_unknown_template_falls_back_to_default(self) -> None:
        """A template with no catalog entry degrades to Quarter-Month."""
        assert get_config("day_hour").template == ZoomTemplate.QUARTER_MONTH
        assert get_config(None).template == ZoomTemplate.QUARTER_MONTH

    def test_with_overrides_returns_new_catalog(self) -> None:
        catalog = DEFAULT_CATALOG.with_overrides(
            {ZoomTemplate.WEEK_DAY: {"base_unit_width_px": 14.0, "max_factor": 3.0}}
        )

        assert catalog is not DEFAULT_CATALOG
        assert catalog[ZoomTemplate.WEEK_DAY].base_unit_width_px == 14.0
        assert catalog[ZoomTemplate.WEEK_DAY].max_factor == 3.0
        assert catalog[ZoomTemplate.MONTH_WEEK] == DEFAULT_CATALOG[ZoomTemplate.MONTH_WEEK]
        assert DEFAULT_CATALOG[ZoomTemplate.WEEK_DAY].base_unit_width_px == 12.0

    def test_with_overrides_revalidates(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_CATALOG.with_overrides({ZoomTemplate.WEEK_DAY: {"max_factor": 0.5}})

    def test_default_template_must_be_present(self) -> None:
        with pytest.raises(ValueError, match="missing from catalog"):
            ZoomCatalog((DEFAULT_CATALOG[ZoomTemplate.WEEK_DAY],))


class TestConfigValidation:
    def test_zero_base_width_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ZoomTemplateConfig(
                template=ZoomTemplate.WEEK_DAY, base_unit_width_px=0, template_unit_days=1
            )

    def test_zero_unit_days_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ZoomTemplateConfig(
                template=ZoomTemplate.WEEK_DAY, base_unit_width_px=12, template_unit_days=0
            )

    def test_max_below_min_rejected(self) -> None:
        with pytest.raises(ValidationError, match="max_factor"):
            ZoomTemplateConfig(
                template=ZoomTemplate.WEEK_DAY,
                base_unit_width_px=12,
                template_unit_days=1,
                min_factor=2.0,
                max_factor=1.5,
            )


class TestWidthCalculations:
    @pytest.mark.parametrize("template", list(ZoomTemplate))
    @pytest.mark.parametrize("factor", [0.2, 1.0, 1.7, 2.5, 3.5, 10.0])
    @pytest.mark.parametrize("duration", [1, 7, 14, 30.5, 90, 365])
    def test_task_width_matches_day_width(
        self, template: ZoomTemplate, factor: float, duration: float
    ) -> None:
        """Both width formulas agree for every factor, clamped or not."""
        config = DEFAULT_CATALOG[template]

        assert task_pixel_width(config, duration, factor) == pytest.approx(
            effective_day_width(config, factor) * duration
        )

    def test_month_week_at_double_zoom(self) -> None:
        config = DEFAULT_CATALOG[ZoomTemplate.MONTH_WEEK]

        assert effective_day_width(config, 2.0) == pytest.approx(36 / 7)
        assert task_pixel_width(config, 14, 2.0) == pytest.approx(72.0)

    def test_week_day_unit_width(self) -> None:
        assert effective_day_width(DEFAULT_CATALOG[ZoomTemplate.WEEK_DAY], 1.0) == 12.0

    @pytest.mark.parametrize("template", list(ZoomTemplate))
    def test_day_width_monotonic_in_factor(self, template: ZoomTemplate) -> None:
        config = DEFAULT_CATALOG[template]
        widths = [effective_day_width(config, f) for f in (1.0, 1.5, 2.0, 2.5)]

        assert widths == sorted(widths)
        assert widths[0] < widths[-1]

    @pytest.mark.parametrize("template", list(ZoomTemplate))
    def test_factor_clamped(self, template: ZoomTemplate) -> None:
        config = DEFAULT_CATALOG[template]

        assert effective_day_width(config, 0.1) == effective_day_width(config, config.min_factor)
        assert effective_day_width(config, 50) == effective_day_width(config, config.max_factor)

    def test_is_valid_factor(self) -> None:
        config = DEFAULT_CATALOG[ZoomTemplate.WEEK_DAY]

        assert is_valid_factor(config, 1.0)
        assert is_valid_factor(config, 2.5)
        assert not is_valid_factor(config, 2.6)
        assert not is_valid_factor(config, 0.9)

    def test_state_clamped(self) -> None:
        state = ZoomState(template=ZoomTemplate.WEEK_DAY, factor=5.0)

        assert state.clamped().factor == 2.5
        assert state.factor == 5.0


class TestTaskVisibility:
    def test_single_day_visible_at_week_day(self) -> None:
        assert is_task_visible(DEFAULT_CATALOG[ZoomTemplate.WEEK_DAY], 1, 1.0)

    def test_short_task_hidden_at_year_quarter(self) -> None:
        """A month-long task is only 8px wide at the coarsest zoom."""
        config = DEFAULT_CATALOG[ZoomTemplate.YEAR_QUARTER]

        assert task_pixel_width(config, 30, 1.0) == pytest.approx(8.0)
        assert not is_task_visible(config, 30, 1.0)
        assert display_task_width(config, 30, 1.0) == MIN_TASK_WIDTH_PX

    def test_display_width_unchanged_when_visible(self) -> None:
        config = DEFAULT_CATALOG[ZoomTemplate.MONTH_WEEK]

        assert display_task_width(config, 14, 2.0) == pytest.approx(72.0)
