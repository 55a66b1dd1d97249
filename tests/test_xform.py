import pytest
from polychannel.geom import vclose
from polychannel.xform import *
## unit tests for polychannel xform.py

class TestXform:
    """unit tests for matrix operations"""

    def test_matrix(self):
        foo = Matrix([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]])
        bar = Matrix([[1, 0, 0, 1], [0, 1, 0, 1], [0, 0, 1, 1], [0, 0, 0, 1]])
        I = Matrix()
        assert I.mul(bar).m == bar.m
        assert I.mul(foo).m == foo.m
        assert I.mul(I).m == I.m
        assert foo.mul(bar).m == [[1, 2, 3, 10], [5, 6, 7, 26],
                                  [9, 10, 11, 42], [13, 14, 15, 58]]
        assert foo.getcol(3) == [4, 8, 12, 16]
        assert foo.tolist() == foo.m
        assert I.mul((1.0, 2.0, 3.0)) == (1.0, 2.0, 3.0)

    def test_bad_matrix(self):
        with pytest.raises(ValueError):
            Matrix([[1, 2], [3, 4]])
        with pytest.raises(ValueError):
            Matrix([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, "x"]])
        with pytest.raises(ValueError):
            Matrix().getcol(4)
        with pytest.raises(ValueError):
            Matrix().mul("nope")

    def test_rotation(self):
        R = Rotation((0, 0, 1), 90)
        assert vclose(R.mul((1, 0, 0)), (0, 1, 0))
        Ri = Rotation((0, 0, 1), -90)
        assert vclose(Ri.mul(R.mul((1, 2, 3))), (1, 2, 3))
        ## non-unit axis is normalized
        assert vclose(Rotation((0, 0, 7), 90).mul((1, 0, 0)), (0, 1, 0))
        assert vclose(Rotation((0, -1, 0), 90).mul((1, 0, 0)), (0, 0, 1))
        with pytest.raises(ValueError):
            Rotation((0, 0, 0), 45)

    def test_translation_and_scale(self):
        T = Translation((5, -1, 2))
        assert T.mul((1, 1, 1)) == (6.0, 0.0, 3.0)
        S = Scale((1, 2, 3))
        assert S.mul((1, 1, 1)) == (1.0, 2.0, 3.0)
        with pytest.raises(ValueError):
            Scale(2)

    def test_compose(self):
        M = Translation((5, 0, 0)).mul(Rotation((0, 0, 1), 90))
        assert vclose(M.mul((1, 0, 0)), (5, 1, 0))
