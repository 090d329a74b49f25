"""Tests for pixel partitioning, the parallel renderer and gamma encoding."""

import numpy as np
import pytest

from pathtracer.config import RenderConfig
from pathtracer.geometry.hittable import Hittable
from pathtracer.renderer.integrator import background_color
from pathtracer.renderer.raytracer import (RenderError, Renderer, partition_pixels,
                                          pixel_at, pixel_rng, render_slice)
from pathtracer.renderer.tone_mapping import gamma2_encode
from pathtracer.scenes import three_spheres_camera, three_spheres_scene


class ExplodingWorld(Hittable):
    def hit(self, ray, t_min, t_max):
        raise RuntimeError("boom")


def small_config(**overrides):
    settings = dict(width=6, height=4, samples_per_pixel=2, max_depth=50, worker_count=3, seed=3)
    settings.update(overrides)
    return RenderConfig(**settings)


class TestPartition:
    @pytest.mark.parametrize("pixel_count,workers", [
        (200000, 8), (4, 8), (7, 3), (10, 1), (0, 4), (13, 13), (17, 5),
    ])
    def test_slices_cover_every_pixel_once(self, pixel_count, workers):
        slices = partition_pixels(pixel_count, workers)
        assert len(slices) == workers

        covered = []
        for start, end in slices:
            assert start <= end
            covered.extend(range(start, end))
        assert covered == list(range(pixel_count))

        base, rest = divmod(pixel_count, workers)
        sizes = [end - start for start, end in slices]
        assert sizes[:-1] == [base] * (workers - 1)
        assert sizes[-1] == base + rest

    def test_rejects_zero_workers(self):
        with pytest.raises(ValueError):
            partition_pixels(10, 0)

    def test_pixel_order_is_column_major(self):
        assert [pixel_at(k, 3) for k in range(7)] == [
            (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2), (2, 0),
        ]


class TestToneMapping:
    def test_gamma_two_and_rounding(self):
        assert gamma2_encode(np.array([0.25, 1.0, 0.0])).tolist() == [128, 255, 0]

    def test_saturates_out_of_range_values(self):
        assert gamma2_encode(np.array([4.0, -1.0, 0.0001])).tolist() == [255, 0, 3]

    def test_channel_order_is_rgb(self):
        assert gamma2_encode(np.array([1.0, 0.0, 0.25])).tolist() == [255, 0, 128]

    def test_encodes_whole_image_to_bytes(self):
        linear = np.full((4, 6, 3), 0.25)
        encoded = gamma2_encode(linear)
        assert encoded.shape == (4, 6, 3)
        assert encoded.dtype == np.uint8
        assert (encoded == 128).all()


class TestRenderer:
    def test_empty_scene_renders_exact_background(self, empty_scene, pinhole_camera):
        config = RenderConfig(width=2, height=2, samples_per_pixel=1, max_depth=50,
                              worker_count=2, seed=11)
        image = Renderer(config, executor="thread").render(empty_scene, pinhole_camera)

        assert image.shape == (2, 2, 3)
        assert image.dtype == np.uint8
        for column in range(2):
            for row in range(2):
                rng = pixel_rng(11, column, row)
                u = (column + rng.random()) / 2
                v = (row + rng.random()) / 2
                sky = background_color(pinhole_camera.get_ray(u, v))
                expected = gamma2_encode(np.array([sky.x, sky.y, sky.z]))
                np.testing.assert_array_equal(image[row, column], expected)

    def test_bottom_row_is_whiter_than_top_row(self, empty_scene, pinhole_camera):
        config = RenderConfig(width=3, height=8, samples_per_pixel=1, max_depth=50,
                              worker_count=2, seed=1)
        image = Renderer(config, executor="thread").render(empty_scene, pinhole_camera)
        # Sky blue has the least red, and it grows toward the top
        assert image[0, 1, 0] > image[7, 1, 0]

    def test_seeded_render_is_independent_of_worker_count(self):
        world = three_spheres_scene()
        camera = three_spheres_camera(6 / 4)
        images = [
            Renderer(small_config(worker_count=n), executor="thread").render(world, camera)
            for n in (1, 3, 5, 30)
        ]
        for image in images[1:]:
            np.testing.assert_array_equal(images[0], image)

    @pytest.mark.slow
    def test_process_and_thread_executors_agree(self):
        world = three_spheres_scene()
        camera = three_spheres_camera(6 / 4)
        config = small_config(worker_count=2)
        by_process = Renderer(config, executor="process").render(world, camera)
        by_thread = Renderer(config, executor="thread").render(world, camera)
        np.testing.assert_array_equal(by_process, by_thread)

    def test_unseeded_render_covers_every_pixel(self):
        world = three_spheres_scene()
        camera = three_spheres_camera(6 / 4)
        image = Renderer(small_config(seed=None, samples_per_pixel=1),
                         executor="thread").render(world, camera)
        assert image.shape == (4, 6, 3)

    def test_render_slice_returns_only_its_pixels(self, empty_scene, pinhole_camera):
        config = small_config()
        pixels = render_slice(5, 9, config, pinhole_camera, empty_scene)
        assert sorted(pixels) == sorted(pixel_at(k, config.height) for k in range(5, 9))

    def test_render_slice_returns_linear_colors(self, empty_scene, pinhole_camera):
        config = small_config(samples_per_pixel=1)
        pixels = render_slice(0, 1, config, pinhole_camera, empty_scene)
        rng = pixel_rng(config.seed, 0, 0)
        u = rng.random() / config.width
        v = rng.random() / config.height
        sky = background_color(pinhole_camera.get_ray(u, v))
        assert pixels[(0, 0)] == pytest.approx((sky.x, sky.y, sky.z))

    def test_worker_failure_propagates(self, pinhole_camera):
        renderer = Renderer(small_config(), executor="thread")
        with pytest.raises(RuntimeError, match="boom"):
            renderer.render(ExplodingWorld(), pinhole_camera)

    def test_merge_detects_missing_pixels(self):
        renderer = Renderer(RenderConfig(width=2, height=1, samples_per_pixel=1,
                                         max_depth=50, worker_count=1))
        with pytest.raises(RenderError, match="not rendered"):
            renderer.merge([{(0, 0): (0.1, 0.2, 0.3)}])

    def test_merge_detects_duplicate_pixels(self):
        renderer = Renderer(RenderConfig(width=2, height=1, samples_per_pixel=1,
                                         max_depth=50, worker_count=2))
        with pytest.raises(RenderError, match="more than one worker"):
            renderer.merge([{(0, 0): (0.1, 0.2, 0.3)},
                            {(0, 0): (0.1, 0.2, 0.3), (1, 0): (0.0, 0.0, 0.0)}])

    def test_merge_places_pixels_by_row_and_column(self):
        renderer = Renderer(RenderConfig(width=2, height=1, samples_per_pixel=1,
                                         max_depth=50, worker_count=2))
        image = renderer.merge([{(1, 0): (0.4, 1.5, 0.6)}, {(0, 0): (0.1, 0.2, 0.3)}])
        # Linear values are stored unclamped
        assert image.dtype == np.float64
        assert image.tolist() == [[[0.1, 0.2, 0.3], [0.4, 1.5, 0.6]]]

    def test_rejects_unknown_executor(self):
        with pytest.raises(ValueError):
            Renderer(small_config(), executor="gpu")
