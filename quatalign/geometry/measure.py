'''For determining and adjusting the sizes (measures) of geometric objects'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Any, Optional, Union
import numpy as np

from .arraytypes import Shape, N, Numeric


def normalize(
        vector : np.ndarray[Shape[Any], Numeric],
        order  : Optional[Union[int, float, str]]=None,
    ) -> None:
    '''Normalize a vector or array of vectors in-place'''
    norms = np.atleast_1d( # ensure shape is broadcastable, even for scalars
        np.linalg.norm(vector, ord=order, axis=-1, keepdims=True)
    )
    vector /= norms

def normalized(
        vector : np.ndarray[Shape[N, ...], Numeric],
        order  : Optional[Union[int, float, str]]=None,
    ) -> np.ndarray[Shape[N, ...], Numeric]:
    '''Return a normalized copy of a vector or array of vectors;
    The array supplied to "vector" is unchanged'''
    new_vector = np.array(vector, dtype=np.result_type(vector, float)) # preserve original vector; integer arrays can't be divided in-place
    normalize(new_vector, order=order)

    return new_vector

def rmsd(
        positions : np.ndarray[Shape[N, 3], float],
        reference : np.ndarray[Shape[N, 3], float],
        weights   : Optional[np.ndarray[Shape[N], float]]=None,
    ) -> float:
    '''
    Compute the (optionally weighted) root-mean-square deviation between
    two equally-sized sets of points, paired up by index
    
    Parameters
    ----------
    positions : Array[[N, 3], float]
        The points being compared
    reference : Array[[N, 3], float]
        The points being compared against
    weights : Array[[N,], float], optional
        Relative weight (e.g. mass) of each point pair
        If not provided, all pairs are weighted equally
        
    Returns
    -------
    rmsd : float
        The value sqrt(sum(w_i * |p_i - r_i|^2) / sum(w_i))
    '''
    positions = np.asarray(positions)
    reference = np.asarray(reference)
    if positions.shape != reference.shape:
        raise ValueError(f'Cannot compare point sets of mismatched shapes {positions.shape} and {reference.shape}')
    
    sq_deviations = np.sum((positions - reference)**2, axis=-1)
    return float(np.sqrt(np.average(sq_deviations, weights=weights))) # NOTE: np.average raises for zero-sum weights
