from typing import TypeAlias

import numpy as np

Scalar: TypeAlias = int | float | complex | np.number
DTypeLike: TypeAlias = np.dtype | type | str
Array: TypeAlias = np.ndarray[tuple[int,], np.dtype[np.number]]
