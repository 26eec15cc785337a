"""Penalty scores used to choose the best mask for a QR code matrix."""

from __future__ import annotations

from qrforge.debug import debug_logf
from qrforge.kmp import kmp_count, kmp_next
from qrforge.matrix import Matrix
from qrforge.matrix_type import QRValue
from qrforge.utilities import binary_to_qrvalues, samestate

MAX_SCORE = 2**31 - 1

_PATTERN1 = tuple(binary_to_qrvalues("1011101 0000"))
_PATTERN2 = tuple(binary_to_qrvalues("0000 1011101"))
_PATTERN1_NEXT = kmp_next(_PATTERN1)
_PATTERN2_NEXT = kmp_next(_PATTERN2)


def evaluation(mat: Matrix) -> int:
    """Total penalty of a masked matrix; the lower the better."""
    debug_logf("calculate maskScore starting")
    score1 = rule1(mat)
    score2 = rule2(mat)
    score3 = rule3(mat)
    score4 = rule4(mat)
    debug_logf(
        "maskScore: rule1=%d, rule2=%d, rule3=%d, rule4=%d",
        score1,
        score2,
        score3,
        score4,
    )
    return score1 + score2 + score3 + score4


def _score_line(values: list[QRValue]) -> int:
    score, count, current = 0, 0, QRValue.INIT_V0
    for value in values:
        if not samestate(value, current):
            current = value
            count = 1
            continue
        count += 1
        if count == 5:
            score += 3
        elif count > 5:
            score += 1
    return score


def rule1(mat: Matrix) -> int:
    """Penalise runs of five or more modules of the same colour in rows and columns."""
    if mat.width != mat.height:
        debug_logf("matrix width != height, skip rule1")
        return MAX_SCORE

    return sum(
        _score_line(mat.row(cur)) + _score_line(mat.col(cur))
        for cur in range(mat.width)
    )


def rule2(mat: Matrix) -> int:
    """Add 3 for every 2x2 block whose four values are identical."""
    cols = [mat.col(x) for x in range(mat.width)]
    blocks = sum(
        1
        for left, right in zip(cols, cols[1:])
        for top_left, bottom_left, top_right, bottom_right in zip(
            left, left[1:], right, right[1:]
        )
        if top_left == top_right == bottom_left == bottom_right
    )
    return 3 * blocks


def rule3(mat: Matrix) -> int:
    """Add 40 for every finder-like pattern 1011101 0000 or 0000 1011101."""
    if mat.width != mat.height:
        debug_logf("rule3 got matrix but not matched prerequisites")
        return MAX_SCORE

    score = 0
    for cur in range(mat.width):
        for line in (mat.col(cur), mat.row(cur)):
            score += 40 * kmp_count(line, _PATTERN1, _PATTERN1_NEXT)
            score += 40 * kmp_count(line, _PATTERN2, _PATTERN2_NEXT)
    return score


def rule4(mat: Matrix) -> int:
    """Penalise the distance of the dark module ratio from 50 percent."""
    if mat.width != mat.height:
        debug_logf("rule4 got matrix but not matched prerequisites")
        return MAX_SCORE

    total = mat.width * mat.height
    dark = sum(1 for _, _, value in mat.iterate() if samestate(value, QRValue.DATA_V1))

    ratio = dark * 100 // total
    step = 1 if ratio % 5 == 0 else 0
    previous = abs((ratio // 5 - step) * 5 - 50)
    following = abs((ratio // 5 + 1 - step) * 5 - 50)
    return min(previous, following) // 5 * 10