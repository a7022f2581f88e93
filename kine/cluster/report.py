'''Print how the hash key space is spread across the open shards

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.
'''

import tabulate

from kine.cluster.topology import fetchStableTopology, filterOpenShards
from kine.config import DEFAULT_POLL_INTERVAL
from kine.hash_key import formatPercentage, hashKeyShare


def getShardRows(shards):
    rows = []
    for shard in filterOpenShards(shards):
        share = hashKeyShare(shard.hash_key_range.start, shard.hash_key_range.end)
        rows.append([shard.shard_id, formatPercentage(share)])

    return rows


def renderTopology(rows):
    rows = [['shard', 'keyspace'], *rows]
    return tabulate.tabulate(rows, tablefmt='simple', headers='firstrow')


async def getTopologyRows(
    client, streamName, pollInterval=DEFAULT_POLL_INTERVAL, timeout=None
):
    description = await fetchStableTopology(client, streamName, pollInterval, timeout)
    return getShardRows(description.shards)


async def printTopology(
    client, streamName, pollInterval=DEFAULT_POLL_INTERVAL, timeout=None
):
    rows = await getTopologyRows(client, streamName, pollInterval, timeout)
    print(renderTopology(rows))
    return rows
