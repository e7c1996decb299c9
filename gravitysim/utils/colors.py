# utils/colors.py

from gravitysim.config import SPEED_BUCKETS, SLOW_BUCKET, IMAGE_ALPHA


def classify_speed(speed):
    """Map a scalar speed to its color bucket name."""
    for threshold, bucket, _ in SPEED_BUCKETS:
        if speed > threshold:
            return bucket
    return SLOW_BUCKET[0]


def bucket_rgb(bucket):
    for _, name, rgb in SPEED_BUCKETS:
        if name == bucket:
            return rgb
    if bucket == SLOW_BUCKET[0]:
        return SLOW_BUCKET[1]
    raise ValueError(f"Unknown color bucket '{bucket}'.")


def image_rgba(bucket, is_secondary=False):
    alpha = IMAGE_ALPHA['secondary'] if is_secondary else IMAGE_ALPHA['primary']
    return bucket_rgb(bucket) + (alpha,)


def doppler_tint(rgb, vz, reference_speed=200.0):
    """Approximate relativistic beaming for an image moving along the line of sight.

    Approaching matter (vz > 0) is shifted toward blue and brightened, receding
    matter toward red and dimmed. Returns (rgb, brightness multiplier).
    """
    factor = vz / reference_speed
    brightness = max(0.1, 1.0 + factor * 1.5)
    shift = factor * 100
    r, g, b = rgb
    r = min(255, max(0, r - shift))
    b = min(255, max(0, b + shift * 1.5))
    return (int(r), int(g), int(b)), brightness
