import logging

import numpy as np
from sklearn.cluster import KMeans

from ..random_source import resolve_rng

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 20
CONVERGENCE_DISTANCE = 1.0  # centroids moving less than this are settled
N_INIT = 10


def _as_points(points):
    return np.asarray(points, dtype=float).reshape(-1, 3)


def _passthrough(points):
    return [tuple(p) for p in np.asarray(points).reshape(-1, 3).tolist()]


def _assign(points, centroids):
    """Index of the nearest centroid for each point; ties go to the lowest index."""
    distances = np.linalg.norm(points[:, None, :] - centroids[None, :, :], axis=2)
    return distances.argmin(axis=1)


def _lloyd(points, k, max_iterations, rng):
    """One k-means run from k distinct random points.

    Returns:
        tuple: (centroids array, labels of the final assignment, iterations run)
    """
    centroids = points[rng.sample_indices(len(points), k)].copy()
    labels = np.zeros(len(points), dtype=int)
    iterations = 0

    while iterations < max_iterations:
        labels = _assign(points, centroids)

        updated = centroids.copy()
        for i in range(k):
            members = points[labels == i]
            # Empty clusters keep their previous centroid
            if len(members):
                updated[i] = np.floor(members.mean(axis=0) + 0.5)

        shift = np.linalg.norm(updated - centroids, axis=1)
        centroids = updated
        iterations += 1
        if np.all(shift <= CONVERGENCE_DISTANCE):
            break

    return centroids, labels, iterations


def _order_by_size(centroids, labels, k):
    """Centroids as integer tuples, largest cluster first."""
    sizes = np.bincount(labels, minlength=k)
    order = np.argsort(-sizes, kind="stable")
    return [tuple(int(c) for c in centroids[i]) for i in order]


def cluster(points, k, max_iterations=MAX_ITERATIONS, rng=None, n_init=N_INIT):
    """Group 3-D points into at most k clusters with Lloyd's k-means.

    Each of the ``n_init`` runs starts from k distinct randomly chosen points;
    the run with the lowest inertia wins.

    Args:
        points: Sequence of (x, y, z) points, usually RGB pixels
        k: Number of clusters
        max_iterations: Upper bound on assignment/update rounds per run
        rng: Seed or RandomSource
        n_init: Number of independent runs

    Returns:
        list of integer (x, y, z) centroids sorted by cluster size, descending.
        Empty input gives an empty list; k or fewer points come back as-is.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    if len(points) == 0:
        return []
    if len(points) <= k:
        return _passthrough(points)

    rng = resolve_rng(rng)
    data = _as_points(points)

    best = None
    for run in range(max(1, n_init)):
        centroids, labels, iterations = _lloyd(data, k, max_iterations, rng)
        inertia = float(((data - centroids[labels]) ** 2).sum())
        logger.debug("k-means run %d: %d iterations, inertia %.1f", run, iterations, inertia)
        if best is None or inertia < best[0]:
            best = (inertia, centroids, labels)

    _, centroids, labels = best
    return _order_by_size(centroids, labels, k)


def cluster_with_sklearn(points, k, max_iterations=MAX_ITERATIONS, rng=None, n_init=N_INIT):
    """Same contract as ``cluster`` using scikit-learn's KMeans."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    if len(points) == 0:
        return []
    if len(points) <= k:
        return _passthrough(points)

    rng = resolve_rng(rng)
    data = _as_points(points)

    kmeans = KMeans(
        n_clusters=k,
        n_init=max(1, n_init),
        max_iter=max_iterations,
        random_state=rng.next_int(2**31 - 1),
    )
    kmeans.fit(data)

    centroids = np.floor(kmeans.cluster_centers_ + 0.5)
    return _order_by_size(centroids, kmeans.labels_, k)


BACKENDS = {
    "lloyd": cluster,
    "sklearn": cluster_with_sklearn,
}
