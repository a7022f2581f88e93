'''Errors raised while resharding

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.
'''


class KineError(Exception):
    pass


class InvalidHashKeyError(KineError, ValueError):
    pass


class StreamNotActiveTimeout(KineError):
    def __init__(self, stream, timeout):
        super().__init__(f'stream {stream} not active after {timeout} seconds')
        self.stream = stream
        self.timeout = timeout


class OddShardCountError(KineError):
    def __init__(self, stream, count):
        msg = f'stream {stream} has an odd number of open shards ({count}), '
        msg += 'cannot halve it. Use the skip-last policy to leave one shard out'
        super().__init__(msg)
        self.stream = stream
        self.count = count


class NonAdjacentShardsError(KineError):
    def __init__(self, stream, shard, adjacentShard):
        super().__init__(
            f'stream {stream}: shards {shard} and {adjacentShard} are not adjacent'
        )
        self.stream = stream
        self.shard = shard
        self.adjacentShard = adjacentShard


class ReshardError(KineError):
    '''A split or merge call failed. Steps done before it are kept.'''

    def __init__(self, stream, step, completed=0):
        super().__init__(f'stream {stream}: {step} failed ({completed} steps done)')
        self.stream = stream
        self.step = step
        self.completed = completed
