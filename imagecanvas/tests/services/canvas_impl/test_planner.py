import pytest

from imagecanvas.services.canvas_impl.planner import DEFAULT_BOX_SIZE, FitPlan, ResizeTarget, plan_fit
from imagecanvas.services.exceptions import ValidationError


class TestResizeTarget:
    def test_default_box_size(self):
        assert ResizeTarget().box_size == DEFAULT_BOX_SIZE == 3000

    @pytest.mark.parametrize("value", [0, -1, -500])
    def test_non_positive_sizes_clamp_to_one(self, value):
        assert ResizeTarget(value).box_size == 1

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, 3000),
            ("", 3000),
            ("  ", 3000),
            ("1200", 1200),
            ("0", 1),
            ("-7", 1),
            (640, 640),
        ],
    )
    def test_from_param(self, value, expected):
        assert ResizeTarget.from_param(value).box_size == expected

    def test_from_param_custom_default(self):
        assert ResizeTarget.from_param(None, default=800).box_size == 800

    def test_from_param_rejects_non_numeric(self):
        with pytest.raises(ValidationError, match="Invalid size parameter"):
            ResizeTarget.from_param("big")

    def test_label(self):
        assert ResizeTarget(500).label == "500x500"


class TestPlanFit:
    def test_landscape_source(self):
        plan = plan_fit(800, 400, ResizeTarget(1000))

        assert plan == FitPlan(scaled_width=1000, scaled_height=500, offset_x=0, offset_y=250, box_size=1000)

    def test_portrait_source(self):
        plan = plan_fit(400, 800, ResizeTarget(1000))

        assert plan == FitPlan(scaled_width=500, scaled_height=1000, offset_x=250, offset_y=0, box_size=1000)

    def test_small_square_source_is_upscaled_without_padding(self):
        plan = plan_fit(100, 100, ResizeTarget(1000))

        assert plan == FitPlan(scaled_width=1000, scaled_height=1000, offset_x=0, offset_y=0, box_size=1000)

    def test_large_source_is_downscaled(self):
        plan = plan_fit(4000, 3000, ResizeTarget(1000))

        assert plan.scaled_size == (1000, 750)
        assert plan.offset == (0, 125)

    def test_rounds_half_up(self):
        # 333 * 0.5 = 166.5
        plan = plan_fit(333, 1000, ResizeTarget(500))

        assert plan.scaled_width == 167
        assert plan.scaled_height == 500
        assert plan.offset_x == 166

    def test_extreme_aspect_ratio_keeps_at_least_one_pixel(self):
        plan = plan_fit(3000, 1, ResizeTarget(1000))

        assert plan.scaled_size == (1000, 1)
        assert plan.offset == (0, 499)

    def test_clamped_box_produces_single_pixel_canvas(self):
        plan = plan_fit(640, 480, ResizeTarget(0))

        assert plan == FitPlan(scaled_width=1, scaled_height=1, offset_x=0, offset_y=0, box_size=1)
        assert plan.canvas_size == (1, 1)

    @pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-1, 5)])
    def test_rejects_non_positive_dimensions(self, width, height):
        with pytest.raises(ValidationError):
            plan_fit(width, height, ResizeTarget(100))

    def test_is_pure(self):
        target = ResizeTarget(777)

        assert plan_fit(1234, 567, target) == plan_fit(1234, 567, target)

    @pytest.mark.parametrize(
        "width, height, box",
        [(800, 400, 1000), (1, 1, 3000), (1920, 1080, 3000), (37, 1001, 256), (5000, 4999, 7), (999, 1000, 1000)],
    )
    def test_fits_inside_canvas_and_touches_one_edge(self, width, height, box):
        plan = plan_fit(width, height, ResizeTarget(box))

        assert 1 <= plan.scaled_width <= box
        assert 1 <= plan.scaled_height <= box
        assert plan.offset_x >= 0 and plan.offset_y >= 0
        assert plan.offset_x + plan.scaled_width <= box
        assert plan.offset_y + plan.scaled_height <= box
        assert box in (plan.scaled_width, plan.scaled_height)
