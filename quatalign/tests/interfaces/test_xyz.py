'''Unit tests for reading and writing plain-text coordinate files'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import pytest
from pathlib import Path
import numpy as np

from quatalign.interfaces.xyz import load_coordinates, save_coordinates


def test_load_coordinates(tmp_path : Path) -> None:
    '''Test that rows of whitespace-delimited columns are read as ordered points, skipping comments'''
    path = tmp_path / 'points.xyz'
    path.write_text(
        '# x y z\n'
        '0.0 1.0 2.0\n'
        '  3.5\t-4.0   5.25\n'
    )
    positions = load_coordinates(path)
    
    assert positions.shape == (2, 3)
    assert np.allclose(positions, [[0.0, 1.0, 2.0], [3.5, -4.0, 5.25]])
    
def test_load_single_point(tmp_path : Path) -> None:
    '''Test that a file with a single line is still read as a set of points (not a lone vector)'''
    path = tmp_path / 'point.xyz'
    path.write_text('1 2 3\n')
    
    assert load_coordinates(path).shape == (1, 3)
    
def test_save_then_load(tmp_path : Path) -> None:
    '''Test that saved coordinates are read back unchanged'''
    path = tmp_path / 'saved.xyz'
    positions = np.random.default_rng(seed=17).normal(size=(8, 3))
    save_coordinates(path, positions)
    
    assert np.allclose(load_coordinates(path), positions)
    
def test_load_wrong_columns(tmp_path : Path) -> None:
    '''Test that files not containing 3D points are rejected'''
    path = tmp_path / 'planar.xyz'
    path.write_text('1 2\n3 4\n')
    with pytest.raises(ValueError):
        _ = load_coordinates(path)
        
def test_save_wrong_shape(tmp_path : Path) -> None:
    '''Test that non-3D point sets cannot be saved'''
    with pytest.raises(ValueError):
        save_coordinates(tmp_path / 'bad.xyz', np.zeros((4, 2)))
