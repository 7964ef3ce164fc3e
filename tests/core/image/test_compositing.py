"""
Tests for core.image.compositing module.

Tests alpha-threshold stamping and source-over blending.
"""

import numpy as np
import pytest

from common.enums import BlendMode
from core.exceptions import DimensionError
from core.image.compositing import composite, copy_with_blend, copy_within_alpha_threshold
from core.raster import RasterBuffer

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


class TestStampComposite:
    """Tests for composite() in stamp mode."""

    def test_red_square_on_blue_base(self, blue_base, red_overlay):
        """Test that the overlay lands exactly in rows/cols [5, 15)."""
        composite(blue_base, red_overlay, 5, 5, 0, BlendMode.STAMP)

        pixels = blue_base.pixels
        assert np.all(pixels[5:15, 5:15] == RED)

        outside = np.ones((20, 20), dtype=bool)
        outside[5:15, 5:15] = False
        assert np.all(pixels[outside] == BLUE)

    def test_samples_outside_footprint_unchanged(self, gradient_image):
        """Test that stamping never touches pixels outside the overlay footprint."""
        base = gradient_image.copy()
        overlay = RasterBuffer.new(4, 3, (1, 2, 3, 200))

        composite(base, overlay, 7, 9, 100)

        mask = np.ones((16, 16), dtype=bool)
        mask[9:12, 7:11] = False
        assert np.array_equal(base.pixels[mask], gradient_image.pixels[mask])

    def test_threshold_is_strict(self, blue_base):
        """Test that samples with alpha equal to the threshold are skipped."""
        overlay = RasterBuffer.new(2, 1)
        overlay.put_pixel(0, 0, (255, 0, 0, 128))
        overlay.put_pixel(1, 0, (255, 0, 0, 129))

        copy_within_alpha_threshold(blue_base, overlay, 0, 0, 128)

        assert blue_base.get_pixel(0, 0) == BLUE
        assert blue_base.get_pixel(1, 0) == (255, 0, 0, 129)

    def test_stamp_copies_source_alpha(self, blue_base):
        """Test that stamped samples carry their own alpha."""
        overlay = RasterBuffer.new(1, 1, (10, 20, 30, 40))

        composite(blue_base, overlay, 3, 4, 0)

        assert blue_base.get_pixel(3, 4) == (10, 20, 30, 40)

    def test_overlay_is_not_modified(self, blue_base, red_overlay):
        """Test that the overlay is read only."""
        before = red_overlay.copy()

        composite(blue_base, red_overlay, 0, 0, 0)

        assert red_overlay == before

    def test_empty_overlay_is_noop(self, blue_base):
        """Test that a zero-size overlay changes nothing."""
        before = blue_base.copy()

        composite(blue_base, RasterBuffer.new(0, 0), 20, 20, 0)

        assert blue_base == before


class TestCompositeBounds:
    """Tests for composite() dimension checking."""

    @pytest.mark.parametrize(
        "x,y,fits",
        [
            (0, 0, True),
            (10, 10, True),
            (11, 10, False),
            (10, 11, False),
            (20, 0, False),
            (-1, 0, False),
            (0, -1, False),
        ],
    )
    def test_raises_iff_footprint_exceeds_base(self, blue_base, red_overlay, x, y, fits):
        """Test that DimensionError is raised exactly when the overlay overflows."""
        if fits:
            composite(blue_base, red_overlay, x, y, 0)
        else:
            with pytest.raises(DimensionError):
                composite(blue_base, red_overlay, x, y, 0)

    def test_failed_composite_writes_nothing(self, blue_base, red_overlay):
        """Test that a rejected composite leaves the base untouched."""
        before = blue_base.copy()

        with pytest.raises(DimensionError) as exc_info:
            composite(blue_base, red_overlay, 15, 15, 0)

        assert blue_base == before
        assert exc_info.value.details["overlay_size"] == (10, 10)

    def test_overlay_larger_than_base(self, red_overlay):
        """Test that an overlay bigger than the base is rejected."""
        with pytest.raises(DimensionError):
            composite(RasterBuffer.new(5, 5), red_overlay, 0, 0, 0)


class TestBlendComposite:
    """Tests for composite() in blend mode."""

    def test_opaque_samples_overwrite(self, blue_base, red_overlay):
        """Test that above-threshold samples behave as in stamp mode."""
        composite(blue_base, red_overlay, 5, 5, 128, BlendMode.BLEND)

        assert np.all(blue_base.pixels[5:15, 5:15] == RED)

    def test_transparent_source_leaves_destination(self, blue_base):
        """Test that zero-alpha samples do not change the background."""
        overlay = RasterBuffer.new(4, 4, (255, 0, 0, 0))

        copy_with_blend(blue_base, overlay, 0, 0, 128)

        assert np.all(blue_base.pixels == BLUE)

    def test_translucent_source_over_opaque_background(self, blue_base):
        """Test source-over result for a 40% red sample on opaque blue."""
        overlay = RasterBuffer.new(1, 1, (255, 0, 0, 102))

        copy_with_blend(blue_base, overlay, 0, 0, 128)

        r, g, b, a = blue_base.get_pixel(0, 0)
        assert r == pytest.approx(102, abs=1)
        assert g == 0
        assert b == pytest.approx(153, abs=1)
        assert a == pytest.approx(255, abs=1)

    def test_translucent_source_over_transparent_background(self):
        """Test that blending onto a clear background keeps the source colour."""
        base = RasterBuffer.new(1, 1)
        overlay = RasterBuffer.new(1, 1, (200, 100, 50, 64))

        composite(base, overlay, 0, 0, 128, BlendMode.BLEND)

        r, g, b, a = base.get_pixel(0, 0)
        assert (r, g, b) == (
            pytest.approx(200, abs=1),
            pytest.approx(100, abs=1),
            pytest.approx(50, abs=1),
        )
        assert a == pytest.approx(64, abs=1)

    def test_stamp_skips_what_blend_mixes(self, blue_base):
        """Test that the same translucent sample is ignored by stamp mode."""
        overlay = RasterBuffer.new(1, 1, (255, 0, 0, 102))
        stamped = blue_base.copy()

        composite(stamped, overlay, 0, 0, 128, BlendMode.STAMP)
        composite(blue_base, overlay, 0, 0, 128, BlendMode.BLEND)

        assert stamped.get_pixel(0, 0) == BLUE
        assert blue_base.get_pixel(0, 0) != BLUE

    def test_deterministic(self, gradient_image):
        """Test that identical inputs give identical outputs."""
        overlay = RasterBuffer.new(8, 8, (90, 180, 30, 77))
        first, second = gradient_image.copy(), gradient_image.copy()

        composite(first, overlay, 4, 4, 128, BlendMode.BLEND)
        composite(second, overlay, 4, 4, 128, BlendMode.BLEND)

        assert first == second
