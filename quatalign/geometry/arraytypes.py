'''Typehints specific to numpy and other array-related functionality'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Annotated, TypeVar

import numpy as np
import numpy.typing as npt
from numbers import Number


# Numeric typehints
Numeric = TypeVar('Numeric', bound=Number) # typehint a number-like generic type

# Numpy array type annotations
Shape = tuple # the shape field of a numpy array
DType = TypeVar('DType', bound=np.generic) # the data type of a numpy array

N = TypeVar('N', bound=int) # typehint the size of a given dimension (usually the number of points)

# Fixed-size vector and array type annotations
## DEV: this type of hard-coding sucks, but is the best we can do with the current Python type system
Vector3  = Annotated[npt.NDArray[DType], Shape[3]]
Array3x3 = Annotated[npt.NDArray[DType], Shape[3, 3]]
ArrayNx3 = Annotated[npt.NDArray[DType], Shape[N, 3]]

Vector4  = Annotated[npt.NDArray[DType], Shape[4]]
Array4x4 = Annotated[npt.NDArray[DType], Shape[4, 4]]

VectorN  = Annotated[npt.NDArray[DType], Shape[N]]
