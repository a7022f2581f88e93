'''Stream commands

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.
'''

import collections

STREAM_STATUS_ACTIVE = 'ACTIVE'
STREAM_STATUS_UPDATING = 'UPDATING'


HashKeyRange = collections.namedtuple('HashKeyRange', ['start', 'end'])

SequenceNumberRange = collections.namedtuple('SequenceNumberRange', ['start', 'end'])

Shard = collections.namedtuple(
    'Shard',
    [
        'shard_id',
        'parent_shard_id',
        'adjacent_parent_shard_id',
        'hash_key_range',
        'sequence_number_range',
    ],
)

StreamDescription = collections.namedtuple(
    'StreamDescription', ['name', 'arn', 'status', 'shards', 'has_more_shards']
)

StreamSummary = collections.namedtuple(
    'StreamSummary', ['name', 'status', 'open_shard_count']
)


def isOpen(shard: Shard) -> bool:
    '''A shard without ending sequence number still accepts records'''
    return shard.sequence_number_range.end is None


def parseShard(data) -> Shard:
    hashKeyRange = data['HashKeyRange']
    sequenceNumberRange = data['SequenceNumberRange']

    return Shard(
        data['ShardId'],
        data.get('ParentShardId'),
        data.get('AdjacentParentShardId'),
        HashKeyRange(hashKeyRange['StartingHashKey'], hashKeyRange['EndingHashKey']),
        SequenceNumberRange(
            sequenceNumberRange['StartingSequenceNumber'],
            sequenceNumberRange.get('EndingSequenceNumber'),
        ),
    )


class StreamCommandsMixin:
    async def describe_stream(self, streamName, exclusiveStartShardId=None):
        '''One page of the stream description'''
        params = {'StreamName': streamName}
        if exclusiveStartShardId is not None:
            params['ExclusiveStartShardId'] = exclusiveStartShardId

        response = await self.send('describe_stream', **params)
        description = response['StreamDescription']

        shards = [parseShard(shard) for shard in description.get('Shards', [])]

        return StreamDescription(
            description['StreamName'],
            description.get('StreamARN'),
            description['StreamStatus'],
            shards,
            description.get('HasMoreShards', False),
        )

    async def describe_stream_summary(self, streamName):
        response = await self.send('describe_stream_summary', StreamName=streamName)
        summary = response['StreamDescriptionSummary']

        return StreamSummary(
            summary['StreamName'],
            summary['StreamStatus'],
            summary.get('OpenShardCount'),
        )

    async def split_shard(self, streamName, shardId, newStartingHashKey):
        await self.send(
            'split_shard',
            StreamName=streamName,
            ShardToSplit=shardId,
            NewStartingHashKey=newStartingHashKey,
        )

    async def merge_shards(self, streamName, shardId, adjacentShardId):
        # order matters, the adjacent shard must come second
        await self.send(
            'merge_shards',
            StreamName=streamName,
            ShardToMerge=shardId,
            AdjacentShardToMerge=adjacentShardId,
        )
