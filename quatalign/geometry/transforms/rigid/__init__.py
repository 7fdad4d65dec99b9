'''Utilities for computing rigid transformations and applying them to points in 3D space
i.e. for working with the Special Euclidean isometry group SE(3)'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from .rotations import quaternion_to_rotation_matrix, quaternion_to_rotation
from .alignment import (
    align,
    align_into,
    alignment_quaternion,
    alignment_rotation_matrix,
    optimal_rigid_transformation,
)
