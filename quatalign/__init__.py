'''Optimal rigid superposition of corresponding 3D point sets by Horn's quaternion method'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from .geometry.transforms.rigid.alignment import (
    align,
    align_into,
    optimal_rigid_transformation,
    AlignmentError,
    DimensionMismatchError,
    EmptyInputError,
    InvalidWeightError,
)
