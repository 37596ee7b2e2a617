import numpy as np
import pytest

from lights.units import (
    PIXELS_PER_METER,
    centered_mouse_position,
    meters_to_physics_unit,
    meters_to_pixels,
    physics_unit_to_meters,
    physics_unit_to_pixels,
    pixels_to_meters,
    pixels_to_physics,
    screen_to_world_position,
)

IDENTITY = np.eye(4)


@pytest.mark.parametrize("vector", [(0.0, 0.0), (64.0, 128.0), (-10.5, 33.25)])
def test_pixels_meters_round_trip(vector):
    assert meters_to_pixels(pixels_to_meters(vector)) == pytest.approx(vector)


@pytest.mark.parametrize("vector", [(1.0, 2.0), (-3.5, 0.25)])
def test_physics_meters_round_trip(vector):
    assert physics_unit_to_meters(meters_to_physics_unit(vector)) == pytest.approx(vector)


@pytest.mark.parametrize("vector", [(12.0, -40.0), (640.0, 320.0)])
def test_pixels_physics_round_trip(vector):
    assert physics_unit_to_pixels(pixels_to_physics(vector)) == pytest.approx(vector)


def test_one_meter_is_pixels_per_meter():
    assert meters_to_pixels((1.0, 0.0)) == pytest.approx((PIXELS_PER_METER, 0.0))


def test_pixel_y_axis_is_flipped():
    _, down = pixels_to_meters((0.0, 64.0))
    _, up = pixels_to_meters((0.0, -64.0))
    assert down == pytest.approx(-up)
    assert down < 0


def test_centered_mouse_at_window_centre_is_origin():
    assert centered_mouse_position((400, 300), (800, 600)) == (0, 0)


def test_centered_mouse_top_left():
    assert centered_mouse_position((0, 0), (800, 600)) == (-400, 300)


def test_screen_to_world_identity_centre():
    assert screen_to_world_position((400, 300), (800, 600), IDENTITY, IDENTITY) == pytest.approx(
        (0.0, 0.0)
    )


def test_screen_to_world_identity_corner():
    assert screen_to_world_position((0, 0), (800, 600), IDENTITY, IDENTITY) == pytest.approx(
        (-1.0, 1.0)
    )


def test_screen_to_world_scaled_projection_halves_result():
    projection = np.diag([2.0, 2.0, 1.0, 1.0])
    plain = screen_to_world_position((100, 50), (800, 600), IDENTITY, IDENTITY)
    scaled = screen_to_world_position((100, 50), (800, 600), projection, IDENTITY)
    assert scaled == pytest.approx((plain[0] / 2, plain[1] / 2))


def test_screen_to_world_view_translation_shifts_result():
    view = np.eye(4)
    view[0, 3] = -5.0
    plain = screen_to_world_position((200, 100), (800, 600), IDENTITY, IDENTITY)
    moved = screen_to_world_position((200, 100), (800, 600), IDENTITY, view)
    assert moved[0] - plain[0] == pytest.approx(5.0)
    assert moved[1] == pytest.approx(plain[1])


def test_screen_to_world_singular_matrix_raises():
    with pytest.raises(np.linalg.LinAlgError):
        screen_to_world_position((0, 0), (800, 600), np.zeros((4, 4)), IDENTITY)