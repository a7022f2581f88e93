'''Hash key arithmetic over the 128 bits kinesis partition key space

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.

Hash keys travel as decimal strings, they do not fit in 64 bits.
'''

from fractions import Fraction

from kine.errors import InvalidHashKeyError

MAX_HASH_KEY = 2 ** 128


def parseHashKey(value) -> int:
    if not isinstance(value, str) or not (value.isascii() and value.isdigit()):
        raise InvalidHashKeyError(f'invalid hash key: {value!r}')

    return int(value)


def computeMidpoint(startingHashKey: str, endingHashKey: str) -> str:
    '''New starting hash key to split a shard in two halves'''
    start = parseHashKey(startingHashKey)
    end = parseHashKey(endingHashKey)

    if start > end:
        raise InvalidHashKeyError(
            f'starting hash key {startingHashKey} > ending hash key {endingHashKey}'
        )

    return str((start + end) // 2)


def hashKeyShare(startingHashKey: str, endingHashKey: str, maxKey=MAX_HASH_KEY):
    start = parseHashKey(startingHashKey)
    end = parseHashKey(endingHashKey)

    return Fraction(end - start, maxKey)


def formatPercentage(share) -> str:
    return '%.2f %%' % (float(share) * 100)
