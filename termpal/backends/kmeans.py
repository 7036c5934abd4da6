"""K-means backend, clustering the samples in CIE Lab."""

from collections import Counter
from collections.abc import Sequence
from typing import ClassVar

import numpy as np
from sklearn.cluster import KMeans

from ..colors import lab_to_rgb, rgb_to_lab
from ..models import Backend, Color
from . import register_backend
from .base import QuantizerBackend

BLACK: Color = (0, 0, 0)

SEEDS = (64, 65, 66)
MAX_ITER = 100
TOLERANCE = 0.001


@register_backend
class KMeansBackend(QuantizerBackend):
    """Weighted k-means over the distinct sample colors.

    Each distinct color is clustered once, weighted by its number of
    occurrences. The clustering runs once per seed in `SEEDS` and the run
    with the lowest inertia wins. When there are fewer distinct colors than
    requested, the palette is padded with black.
    """

    name: ClassVar[str] = Backend.KMEANS.value

    @staticmethod
    def _cluster(lab: np.ndarray, weights: np.ndarray, count: int) -> KMeans:
        runs = [
            KMeans(n_clusters=count, n_init=1, max_iter=MAX_ITER, tol=TOLERANCE, random_state=seed).fit(lab, sample_weight=weights)
            for seed in SEEDS
        ]
        return min(runs, key=lambda run: run.inertia_)

    def generate_palette(self, colors: Sequence[Color], count: int) -> list[Color] | None:
        if not colors or count < 1:
            return None

        occurrences = Counter(colors)
        distinct = np.array(list(occurrences.keys()), dtype=np.uint8)
        weights = np.array(list(occurrences.values()), dtype=np.float64)

        best = self._cluster(rgb_to_lab(distinct), weights, min(count, len(distinct)))
        centroids = lab_to_rgb(best.cluster_centers_)

        palette: list[Color] = [(int(r), int(g), int(b)) for r, g, b in centroids]
        palette.extend([BLACK] * (count - len(palette)))
        return palette
