from surfpy.core import compose


def test_compose_identity():
    identity = compose()
    marker = object()
    assert identity(marker) is marker
    assert identity(3.5) == 3.5


def test_compose_single():
    def double(x):
        return 2 * x

    assert compose(double) is double
    assert compose(double)(4) == 8


def test_compose_order():
    # each step has a different input type so a wrong order fails loudly
    pipeline = compose(len, lambda n: n * 1.5, str, lambda s: s + '!')
    assert pipeline([1, 2, 3, 4]) == '6.0!'


def test_compose_many_steps():
    steps = [lambda x, i=i: x * 10 + i for i in range(5)]
    assert compose(*steps)(0) == 1234


def test_compose_reusable():
    pipeline = compose(lambda x: x + 1, lambda x: x * 3)
    assert pipeline(1) == 6
    assert pipeline(1) == 6
    assert pipeline(2) == 9
