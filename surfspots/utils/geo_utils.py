"""Geographic utility functions."""
import hashlib


def generate_spot_id(name: str, lat: float, lon: float) -> str:
    """Generate a unique ID for a spot based on its name and coordinates."""
    data = f"{name}:{float(lat):.6f}:{float(lon):.6f}"
    return hashlib.md5(data.encode()).hexdigest()[:12]
