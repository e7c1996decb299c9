import pytest

from gravitysim.utils.colors import bucket_rgb, classify_speed, doppler_tint, image_rgba


@pytest.mark.parametrize("speed, bucket", [
    (500.0, 'hot-white'),
    (220.01, 'hot-white'),
    (220.0, 'yellow-white'),
    (150.01, 'yellow-white'),
    (150.0, 'orange'),
    (100.01, 'orange'),
    (100.0, 'deep-red'),
    (0.0, 'deep-red'),
])
def test_speed_thresholds(speed, bucket):
    assert classify_speed(speed) == bucket


def test_bucket_colors():
    assert bucket_rgb('hot-white') == (220, 240, 255)
    assert bucket_rgb('deep-red') == (180, 60, 30)
    with pytest.raises(ValueError):
        bucket_rgb('ultraviolet')


def test_secondary_images_are_dimmer():
    primary = image_rgba('orange')
    secondary = image_rgba('orange', is_secondary=True)
    assert primary[:3] == secondary[:3] == (255, 150, 50)
    assert secondary[3] < primary[3]


def test_doppler_tint():
    rgb, brightness = doppler_tint((255, 150, 50), 0.0)
    assert rgb == (255, 150, 50) and brightness == 1.0

    approaching, bright = doppler_tint((255, 150, 50), 200.0)
    receding, dim = doppler_tint((255, 150, 50), -200.0)
    assert approaching[2] > 50 and approaching[0] < 255
    assert receding[0] == 255 and receding[2] == 0
    assert bright > 1.0 > dim >= 0.1
