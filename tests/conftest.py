import pytest


@pytest.fixture
def testprob() -> str:
    """Sample problem from https://lpsolve.sourceforge.net/5.5/mps-format.htm."""
    return """NAME          TESTPROB
ROWS
 N  COST
 L  LIM1
 G  LIM2
 E  MYEQN
COLUMNS
    XONE      COST                 1   LIM1                 1
    XONE      LIM2                 1
    YTWO      COST                 4   LIM1                 1
    YTWO      MYEQN               -1
    ZTHREE    COST                 9   LIM2                 1
    ZTHREE    MYEQN                1
RHS
    RHS1      LIM1                 5   LIM2                10
    RHS1      MYEQN                7
BOUNDS
 UP BND1      XONE                 4
 LO BND1      YTWO                -1
 UP BND1      YTWO                 1
ENDATA
"""


@pytest.fixture
def testprob_lp() -> str:
    return (
        "Optimize\n"
        "    COST:  XONE + 4*YTWO + 9*ZTHREE\n"
        "Subject To\n"
        "    LIM1:  XONE + YTWO <= 5\n"
        "    LIM2:  XONE + ZTHREE >= 10\n"
        "    MYEQN:  - YTWO + ZTHREE = 7\n"
        "Bounds\n"
        "End"
    )
