## 4x4 matrix transformations in 3D homogeneous coordinates for
## polychannel placements, derived from the yapCAD xform module

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

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

from math import cos, sin, pi
import polychannel.geom as geom

## a matrix is represented as a list of four four-element rows.
## Placement vectors are 3-tuples; multiplying a matrix by one lifts it
## into the w=1 hyperplane and projects the result back down, so Mx
## always means "transform the point x".


class Matrix:
    """4x4 transformation matrix class for transforming homogeneous 3D coordinates"""

    def __init__(self, a=None):
        self.m = [[1.0, 0.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0, 0.0],
                  [0.0, 0.0, 1.0, 0.0],
                  [0.0, 0.0, 0.0, 1.0]]

        if isinstance(a, (tuple, list)):
            if len(a) != 4 or any(len(r) != 4 for r in a):
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
            for i in range(4):
                for j in range(4):
                    x = a[i][j]
                    if not geom.isgoodnum(x):
                        raise ValueError('bad element in matrix initialization: {}'.format(x))
                    self.m[i][j] = float(x)
        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))

    def getcol(self, j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return [self.m[0][j], self.m[1][j], self.m[2][j], self.m[3][j]]

    def tolist(self):
        """return the matrix as a nested list of rows"""
        return [list(r) for r in self.m]

    # matrix multiply.  If x is a matrix, compute MX.  If x is a 3D
    # point, compute Mx in homogeneous coordinates and return the
    # projected 3-tuple.
    def mul(self, x):
        if isinstance(x, Matrix):
            result = Matrix()
            for i in range(4):
                row = self.m[i]
                for j in range(4):
                    col = x.getcol(j)
                    result.m[i][j] = sum(row[k]*col[k] for k in range(4))
            return result
        elif isinstance(x, (tuple, list)) and len(x) == 3:
            h = (x[0], x[1], x[2], 1.0)
            r = [sum(self.m[i][k]*h[k] for k in range(4)) for i in range(4)]
            return (r[0]/r[3], r[1]/r[3], r[2]/r[3])

        raise ValueError('bad thing passed to mul(): {}'.format(x))


# return the generalized 4x4 arbitrary axis rotation matrix
def Rotation(axis, angle):
    m = geom.mag(axis)
    u = axis
    if m < geom.epsilon:
        raise ValueError('zero-length rotation axis not allowed')
    if not geom.close(m, 1.0):
        u = geom.scale3(axis, 1.0/m)

    rad = (angle % 360.0)*pi/180.0

    ux = u[0]
    uy = u[1]
    uz = u[2]

    cang = cos(rad)
    cmin = 1.0-cang
    sang = sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin-uz*sang, ux*uz*cmin+uy*sang, 0],
         [uy*ux*cmin+uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang, 0],
         [uz*ux*cmin-uy*sang, uz*uy*cmin+ux*sang, cang+uz*uz*cmin, 0],
         [0, 0, 0, 1]]

    return Matrix(R)


def Translation(delta):
    dx = delta[0]
    dy = delta[1]
    dz = delta[2]
    T = [[1, 0, 0, dx],
         [0, 1, 0, dy],
         [0, 0, 1, dz],
         [0, 0, 0, 1]]
    return Matrix(T)


# per-axis scale from a 3-vector of factors
def Scale(factors):
    if not isinstance(factors, (tuple, list)) or len(factors) != 3:
        raise ValueError('bad scaling values passed to Scale')
    sx, sy, sz = factors
    S = [[sx, 0, 0, 0],
         [0, sy, 0, 0],
         [0, 0, sz, 0],
         [0, 0, 0, 1.0]]
    return Matrix(S)
