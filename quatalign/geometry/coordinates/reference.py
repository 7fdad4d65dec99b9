'''Reference points and frames for sets of coordinates'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Optional
import numpy as np

from ..arraytypes import Shape, N, Numeric


def centroid(
        positions : np.ndarray[Shape[N, 3], Numeric],
        weights : Optional[np.ndarray[Shape[N], Numeric]]=None,
    ) -> np.ndarray[Shape[3], Numeric]:
    '''
    Compute the weighted mean position (e.g. center of mass) of a set of points,
    i.e. sum(w_i * p_i) / sum(w_i); all points are weighted equally if no weights are given
    
    Raises ValueError if the weights do not have a positive sum,
    rather than silently returning NaN or infinite coordinates
    '''
    positions = np.asarray(positions)
    if weights is None:
        weights = np.ones(positions.shape[0], dtype=positions.dtype)
    weights = np.asarray(weights)
    
    total_weight = weights.sum()
    if not (total_weight > 0.0): # NOTE: phrased this way to also catch NaN
        raise ValueError(f'Weights must have a positive sum to define a centroid (got {total_weight})')
    
    return (weights @ positions) / total_weight
