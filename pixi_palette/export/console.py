from ..color import contrast_table, create_color, display_color_name, hex_to_rgb


def print_palette(colors, title="Palette"):
    """Print each color with its RGB, HSL and name"""
    print(f"\n{title}")
    print("=" * 60)
    for hex_color in colors:
        color = create_color(*hex_to_rgb(hex_color))
        h, s, l = color.hsl
        r, g, b = color.rgb
        print(
            f"  {color.hex}  rgb({r:3d}, {g:3d}, {b:3d})  "
            f"hsl({h:5.1f}, {s:5.1f}%, {l:5.1f}%)  {display_color_name(color.hex)}"
        )


def print_feedback(feedback):
    print(f"\nHarmony: {feedback.harmony}")
    print(feedback.message)
    for suggestion in feedback.suggestions:
        print(f"  - {suggestion}")


def format_contrast_table(colors):
    """Render the pairwise contrast table as text, one row per color."""
    table = contrast_table(colors)
    lines = []
    for first, row in table.items():
        cells = "  ".join(f"{second} {ratio:5.2f}" for second, ratio in row.items())
        lines.append(f"{first}: {cells}")
    return "\n".join(lines)
