from .kmeans import BACKENDS, cluster, cluster_with_sklearn
from .pipeline import extract_palette, extract_palette_from_image
from .sampling import load_rgba_pixels, sample_pixels

__all__ = [
    "BACKENDS",
    "cluster",
    "cluster_with_sklearn",
    "extract_palette",
    "extract_palette_from_image",
    "load_rgba_pixels",
    "sample_pixels",
]
