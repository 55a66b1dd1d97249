## scalar and 3-vector helpers for polychannel
## derived from the yapCAD foundational geometry library
## Copyright (c) 2020 Richard DeVaul
## Copyright (c) 2020 yapCAD contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""scalar and vector helpers for **polychannel**

Vectors in polychannel are plain Python tuples of three numbers,
``(x, y, z)``.  Unlike homogeneous coordinates there is no ``w``
component: placement positions, sizes and offsets are all ordinary
3-vectors, and the homogeneous form is only introduced by
:mod:`polychannel.xform` when a rigid transform is turned into a
matrix.

Tuples are used (rather than lists) so that placements built from them
are hashable, immutable values that compare component-wise with ``==``.
"""

from fractions import Fraction
from math import isfinite, sqrt
from numbers import Real

## constants
epsilon = 0.000005


## operations on scalars
## -----------------------

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, Real)


def close(a, b):
    """ are two scalars the same within epsilon
    """
    return abs(a - b) < epsilon


## operations on vectors
## ------------------------

def vect3(a):
    """Make a 3-vector tuple from a sequence of exactly three finite
    numbers.  Components become floats, except exact
    :class:`~fractions.Fraction` components, which are kept.  Raises
    ``ValueError`` for anything else.
    """
    if not isinstance(a, (tuple, list)) or len(a) != 3:
        raise ValueError('expected a 3-vector, got: {}'.format(a))
    for x in a:
        if not isgoodnum(x) or not isfinite(x):
            raise ValueError('bad component in 3-vector: {}'.format(x))
    return tuple(x if isinstance(x, Fraction) else float(x) for x in a)


ZERO = (0.0, 0.0, 0.0)


def add(a, b):
    """ 3 vector, `a + b`"""
    return (a[0]+b[0], a[1]+b[1], a[2]+b[2])


def sub(a, b):
    """ 3 vector, `a - b`"""
    return (a[0]-b[0], a[1]-b[1], a[2]-b[2])


def scale3(a, c):
    """ 3 vector, vector ``a`` times scalar ``c``, `a * c`"""
    return (a[0]*c, a[1]*c, a[2]*c)


def neg(a):
    """ 3 vector, `-a`"""
    return (-a[0], -a[1], -a[2])


def cross(a, b):
    """ 3 vector cross product, `a x b`"""
    return (a[1]*b[2] - a[2]*b[1],
            a[2]*b[0] - a[0]*b[2],
            a[0]*b[1] - a[1]*b[0])


def dot(a, b):
    """ 3 vector ``a`` dot ``b`` """
    return a[0]*b[0]+a[1]*b[1]+a[2]*b[2]


def mag(a):
    """ compute the magnitude of 3 vector ``a``"""
    return sqrt(a[0]*a[0]+a[1]*a[1]+a[2]*a[2])


def dist(a, b):
    """ euclidean distance between two 3 vector points ``a`` and ``b``"""
    return mag(sub(a, b))


def iszero(a):
    """ is the magnitude of ``a`` zero to within epsilon"""
    return mag(a) < epsilon


def unit(a):
    """ return ``a`` scaled to unit length; zero-length vectors raise
    ``ValueError``"""
    m = mag(a)
    if m < epsilon:
        raise ValueError('cannot normalize zero-length vector: {}'.format(a))
    return scale3(a, 1.0/m)


def vclose(a, b):
    """ determine if two vectors are the same, to within epsilon"""
    return close(mag(sub(a, b)), 0)
