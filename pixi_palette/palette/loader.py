import json

from ..color import normalize_hex


def load_palette_from_json(json_path):
    """Load a palette written by export_json, or a bare JSON list of hex strings.

    Args:
        json_path: Path to palette JSON file

    Returns:
        tuple: (list of normalized hex colors, metadata dict without the leading underscores)
    """
    with open(json_path) as f:
        data = json.load(f)

    if isinstance(data, list):
        return [normalize_hex(value) for value in data], {}

    colors = [normalize_hex(value) for value in data.get("colors", [])]
    metadata = {}

    for key, value in data.items():
        # Metadata keys
        if key.startswith("_"):
            metadata[key[1:]] = value

    return colors, metadata
