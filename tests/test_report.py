'''Test the keyspace report

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.
'''

import asyncio

from kine.client import KinesisClient
from kine.cluster.report import getShardRows, printTopology, renderTopology
from kine.commands.stream import parseShard

from fake_kinesis import MAX_HASH_KEY, FakeKinesis, makeShardData


def test_shard_rows():
    quarter = MAX_HASH_KEY // 4
    shards = [
        parseShard(makeShardData('shardId-0', 0, quarter)),
        parseShard(makeShardData('shardId-1', quarter + 1, MAX_HASH_KEY - 1)),
        parseShard(makeShardData('retired', 0, MAX_HASH_KEY - 1, '42')),
    ]

    rows = getShardRows(shards)
    assert rows == [['shardId-0', '25.00 %'], ['shardId-1', '75.00 %']]


def test_render():
    rows = [['shardId-0', '50.00 %'], ['shardId-1', '50.00 %']]
    table = renderTopology(rows)

    lines = table.splitlines()
    assert 'shard' in lines[0]
    assert 'keyspace' in lines[0]
    assert len(lines) == 4
    assert 'shardId-1' in lines[3]
    assert '50.00 %' in lines[3]


def test_print_topology(capsys):
    fake = FakeKinesis('events', shardCount=4, pageSize=3)
    client = KinesisClient(kinesis=fake)

    rows = asyncio.run(printTopology(client, 'events', pollInterval=0))
    assert len(rows) == 4
    for _, percentage in rows:
        assert percentage == '25.00 %'

    out = capsys.readouterr().out
    assert out.count('25.00 %') == 4
    assert 'shardId-000000000003' in out
