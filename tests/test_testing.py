# local
from xstring.testing import Expected, PASS, Throws, WrapArgs, mock


# ---------------------------------------------------------------------------- #
def fun1(a, b=2, *args, c=3, **kws):
    return a, b, c, args, kws


def throws1():
    raise ValueError()


test_fun1 = Expected(fun1)({
    mock(1):            (1, 2, 3, (), {}),
    mock(1, 1):         (1, 1, 3, (), {}),
    mock(1, b=1):       (1, 1, 3, (), {}),
    mock(1, 1, 1):      (1, 1, 3, (1,), {}),
    mock(1, 1, c=1):    (1, 1, 1, (), {}),
    mock(1, x=1):       (1, 2, 3, (), {'x': 1}),
})

test_throws = Expected(throws1)({(): Throws(ValueError)})

test_plain_tuples = Expected(max)([((1, 2), 2), ((5, 3), 5)])

test_transform = Expected(sorted, transform=tuple)({mock.sorted('cab'): ('a', 'b', 'c')})

test_run = Expected(fun1).run([mock(1), mock(1, 2, 3)])


def test_wrap_args():
    args, kws = mock.anything(1, 'a', key=None)
    assert args == (1, 'a')
    assert kws == (('key', None), )
    assert str(WrapArgs(1, key='x')) == "(1, key='x')"


def test_pass_sentinel():
    assert PASS is not None
