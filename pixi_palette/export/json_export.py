import json

from ..color import normalize_hex


def export_json(
    colors,
    filepath,
    name=None,
    tags=None,
    aesthetic=None,
    feedback=None,
    source_file=None,
):
    """Export a palette as JSON with optional metadata.

    Args:
        colors: Sequence of hex strings
        filepath: Output file path
        name: Palette name
        tags: List of tags
        aesthetic: Aesthetic or scheme the palette was generated with
        feedback: HarmonyFeedback to store alongside the colors
        source_file: Source image filename for metadata
    """
    data = {"colors": [normalize_hex(c) for c in colors]}

    if name:
        data["_name"] = name

    if tags:
        data["_tags"] = list(tags)

    if aesthetic:
        data["_aesthetic"] = aesthetic

    if feedback is not None:
        data["_harmony"] = {
            "rating": feedback.harmony,
            "message": feedback.message,
            "suggestions": list(feedback.suggestions),
        }

    if source_file:
        data["_source"] = source_file

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
