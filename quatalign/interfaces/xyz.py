'''Reading and writing plain-text coordinate files, with one whitespace-delimited "x y z" point per line'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from pathlib import Path
from typing import Union

import numpy as np

from ..geometry.arraytypes import Shape, N


def load_coordinates(path : Union[str, Path], dtype : Union[str, type]='float64') -> np.ndarray[Shape[N, 3], float]:
    '''
    Read the coordinates of an ordered set of 3D points from a text file
    
    Parameters
    ----------
    path : str or Path
        Location of a file containing 3 numeric columns; blank lines and lines beginning with "#" are ignored
    dtype : type, default 'float64'
        The data type of the returned coordinates
        
    Returns
    -------
    positions : Array[[N, 3], float]
        The points in the file, in the order in which they were written
    '''
    positions = np.loadtxt(path, dtype=dtype, comments='#', ndmin=2)
    if positions.size == 0:
        positions = positions.reshape(0, 3)
    
    (n_points, n_cols) = positions.shape
    if n_cols != 3:
        raise ValueError(f'Expected 3 coordinate columns in "{path}", found {n_cols}')
    LOGGER.debug(f'Read {n_points} points from "{path}"')
    
    return positions

def save_coordinates(path : Union[str, Path], positions : np.ndarray[Shape[N, 3], float]) -> None:
    '''Write the coordinates of an ordered set of 3D points to a text file readable by load_coordinates()'''
    positions = np.asarray(positions)
    if (positions.ndim != 2) or (positions.shape[-1] != 3):
        raise ValueError(f'Can only save Nx3 arrays of 3D points, not an array of shape {positions.shape}')
    
    np.savetxt(path, positions)
    LOGGER.debug(f'Wrote {len(positions)} points to "{path}"')
