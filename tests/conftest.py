from pytest import Item, fixture

from rpncalc.session import Session


@fixture
def session() -> Session:
    '''
    A fresh calculator session, empty expression and history.
    '''
    return Session()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP -o enable_assertion_pass_hook=true.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
