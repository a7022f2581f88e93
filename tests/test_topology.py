'''Test reading a stream topology

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.
'''

import asyncio

import pytest

from kine.client import KinesisClient
from kine.cluster.topology import fetchStableTopology, filterOpenShards, waitForActive
from kine.commands.stream import parseShard
from kine.errors import StreamNotActiveTimeout

from fake_kinesis import FakeKinesis, ScriptedKinesis, makeShardData


def makeShards():
    return [
        parseShard(makeShardData('shardId-0', 0, 99, endingSequenceNumber='2000')),
        parseShard(makeShardData('shardId-1', 10, 19)),
        parseShard(makeShardData('shardId-2', 0, 9)),
        parseShard(makeShardData('shardId-3', 100, 199, endingSequenceNumber='3000')),
        parseShard(makeShardData('shardId-4', 20, 99)),
    ]


def test_filter_open_shards():
    assert filterOpenShards([]) == []
    assert filterOpenShards([], sort=True) == []

    shards = filterOpenShards(makeShards())
    ids = [shard.shard_id for shard in shards]
    assert ids == ['shardId-1', 'shardId-2', 'shardId-4']

    for shard in shards:
        assert shard.sequence_number_range.end is None


def test_filter_open_shards_sorted_numerically():
    shards = filterOpenShards(makeShards(), sort=True)
    ids = [shard.shard_id for shard in shards]

    # '9' < '19' < '99', even though '19' < '9' as strings
    assert ids == ['shardId-2', 'shardId-1', 'shardId-4']


def test_filter_open_shards_sorted_beyond_64_bits():
    big = 2 ** 127
    shards = [
        parseShard(makeShardData('high', big, 2 ** 128 - 1)),
        parseShard(makeShardData('low', 0, big - 1)),
    ]
    ids = [shard.shard_id for shard in filterOpenShards(shards, sort=True)]
    assert ids == ['low', 'high']


def test_fetch_paginated_topology():
    fake = FakeKinesis('events', shardCount=5, pageSize=2)
    client = KinesisClient(kinesis=fake)

    description = asyncio.run(fetchStableTopology(client, 'events', pollInterval=0))

    assert description.status == 'ACTIVE'
    assert not description.has_more_shards
    assert len(description.shards) == 5

    cursors = [params.get('ExclusiveStartShardId') for _, params in fake.calls]
    assert cursors == [None, 'shardId-000000000001', 'shardId-000000000003']


def test_fetch_restarts_when_stream_is_updating():
    first = makeShardData('shardId-a', 0, 99)
    stale = makeShardData('shardId-stale', 100, 199)
    second = makeShardData('shardId-b', 100, 149)
    third = makeShardData('shardId-c', 150, 199)

    pages = [
        ('ACTIVE', [first], True),
        # status flip in the middle of the pagination
        ('UPDATING', [stale], False),
        ('ACTIVE', [first], True),
        ('ACTIVE', [second], True),
        ('UPDATING', [], False),
        ('ACTIVE', [first], True),
        ('ACTIVE', [second], True),
        ('ACTIVE', [third], False),
    ]
    fake = ScriptedKinesis(pages)
    client = KinesisClient(kinesis=fake)

    description = asyncio.run(fetchStableTopology(client, 'events', pollInterval=0))

    ids = [shard.shard_id for shard in description.shards]
    assert ids == ['shardId-a', 'shardId-b', 'shardId-c']
    assert len(fake.pages) == 0

    # every restart goes back to the first page
    cursors = [params.get('ExclusiveStartShardId') for params in fake.calls]
    assert cursors == [
        None,
        'shardId-a',
        None,
        'shardId-a',
        'shardId-b',
        None,
        'shardId-a',
        'shardId-b',
    ]


def test_fetch_timeout():
    fake = FakeKinesis('events', shardCount=1)
    fake.status = 'UPDATING'
    fake.pendingPolls = 10 ** 9
    client = KinesisClient(kinesis=fake)

    with pytest.raises(StreamNotActiveTimeout):
        asyncio.run(
            fetchStableTopology(client, 'events', pollInterval=0.01, timeout=0.05)
        )


def test_wait_for_active():
    fake = FakeKinesis('events', shardCount=2, updatingPolls=3)
    fake.status = 'UPDATING'
    fake.pendingPolls = 3
    client = KinesisClient(kinesis=fake)

    summary = asyncio.run(waitForActive(client, 'events', pollInterval=0))
    assert summary.status == 'ACTIVE'
    assert summary.open_shard_count == 2

    operations = [operation for operation, _ in fake.calls]
    assert operations == ['DescribeStreamSummary'] * 4


def test_unknown_stream_error_is_propagated():
    from botocore.exceptions import ClientError

    fake = FakeKinesis('events')
    client = KinesisClient(kinesis=fake)

    with pytest.raises(ClientError):
        asyncio.run(fetchStableTopology(client, 'missing', pollInterval=0))


def test_wait_for_active_timeout():
    fake = FakeKinesis('events', shardCount=1)
    fake.status = 'UPDATING'
    fake.pendingPolls = 10 ** 9
    client = KinesisClient(kinesis=fake)

    with pytest.raises(StreamNotActiveTimeout) as excinfo:
        asyncio.run(waitForActive(client, 'events', pollInterval=0.01, timeout=0.05))

    assert excinfo.value.stream == 'events'
    assert excinfo.value.timeout == 0.05


def test_timeout_is_not_logged_by_the_reader(caplog):
    fake = FakeKinesis('events', shardCount=1)
    fake.status = 'UPDATING'
    fake.pendingPolls = 10 ** 9
    client = KinesisClient(kinesis=fake)

    with pytest.raises(StreamNotActiveTimeout):
        asyncio.run(waitForActive(client, 'events', pollInterval=0.01, timeout=0.03))

    # the command line reports it once, when the error reaches it
    errors = [record for record in caplog.records if record.levelname == 'ERROR']
    assert errors == []
