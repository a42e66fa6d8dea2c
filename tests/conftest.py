import io

import pytest

from ordtree import log
from ordtree.order import chain_order, key_order

from .people import Person, order_people


@pytest.fixture(params=['function', 'method', 'chained'])
def person_order(request):
    """The three ways of handing a Person ordering to a tree."""
    if request.param == 'function':
        return order_people
    if request.param == 'method':
        return Person.order
    return chain_order(key_order(lambda p: p.name), key_order(lambda p: p.age))


@pytest.fixture
def logfile(monkeypatch):
    f = io.StringIO()
    monkeypatch.setattr(log, 'logger',
            log.Logger(loglevel=log.LOG_DEBUG3, logfile=f, colors='never'))
    return f
