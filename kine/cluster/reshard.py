'''Resharding tool, doubles or halves the number of open shards of a stream

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.

A stream accepts one structural change at a time and is UPDATING for a while
after each SplitShard / MergeShards call. Every step waits for the stream to be
ACTIVE again before the next one is sent. Nothing is rolled back on failure,
each split or merge is a valid topology on its own.
'''

import logging

from botocore.exceptions import BotoCoreError, ClientError

from kine.cluster.report import printTopology
from kine.cluster.topology import fetchStableTopology, filterOpenShards, waitForActive
from kine.config import (
    DEFAULT_POLL_INTERVAL,
    ODD_SHARD_POLICY_REJECT,
    ODD_SHARD_POLICY_SKIP_LAST,
)
from kine.errors import NonAdjacentShardsError, OddShardCountError, ReshardError
from kine.hash_key import computeMidpoint, parseHashKey


def computeSplitPlan(shards):
    '''(shard, newStartingHashKey) for every open shard'''
    plan = []
    for shard in filterOpenShards(shards):
        hashKeyRange = shard.hash_key_range
        newStartingHashKey = computeMidpoint(hashKeyRange.start, hashKeyRange.end)
        plan.append((shard, newStartingHashKey))

    return plan


def computeMergePlan(streamName, shards, oddShardPolicy=ODD_SHARD_POLICY_REJECT):
    '''(shardToMerge, adjacentShardToMerge) pairs, in hash key order'''
    openShards = filterOpenShards(shards, sort=True)

    if len(openShards) <= 1:
        return []

    if len(openShards) % 2 == 1:
        if oddShardPolicy != ODD_SHARD_POLICY_SKIP_LAST:
            raise OddShardCountError(streamName, len(openShards))

        lastShard = openShards.pop()
        logging.warning(
            f'{streamName}: odd number of open shards, '
            f'{lastShard.shard_id} will not be merged'
        )

    plan = []
    for i in range(0, len(openShards), 2):
        shard, adjacentShard = openShards[i], openShards[i + 1]

        end = parseHashKey(shard.hash_key_range.end)
        adjacentStart = parseHashKey(adjacentShard.hash_key_range.start)
        if end + 1 != adjacentStart:
            raise NonAdjacentShardsError(
                streamName, shard.shard_id, adjacentShard.shard_id
            )

        plan.append((shard, adjacentShard))

    return plan


def printSplitCommand(streamName, shard, newStartingHashKey):
    cmd = f'aws kinesis split-shard --stream-name {streamName}'
    cmd += f' --shard-to-split {shard.shard_id}'
    cmd += f' --new-starting-hash-key {newStartingHashKey}'
    print(cmd)


def printMergeCommand(streamName, shard, adjacentShard):
    cmd = f'aws kinesis merge-shards --stream-name {streamName}'
    cmd += f' --shard-to-merge {shard.shard_id}'
    cmd += f' --adjacent-shard-to-merge {adjacentShard.shard_id}'
    print(cmd)


async def doubleShardsCoroutine(
    client, streamName, pollInterval=DEFAULT_POLL_INTERVAL, timeout=None, dry=False
):
    description = await fetchStableTopology(client, streamName, pollInterval, timeout)
    plan = computeSplitPlan(description.shards)

    logging.info(f'{streamName}: splitting {len(plan)} shards')

    for completed, (shard, newStartingHashKey) in enumerate(plan):
        if dry:
            printSplitCommand(streamName, shard, newStartingHashKey)
            continue

        logging.info(f'split {shard.shard_id} at {newStartingHashKey}')

        try:
            await client.split_shard(streamName, shard.shard_id, newStartingHashKey)
        except (ClientError, BotoCoreError) as e:
            step = f'split of {shard.shard_id} at {newStartingHashKey}'
            raise ReshardError(streamName, step, completed) from e

        print(f'Waiting for {streamName} to be active...')
        await waitForActive(client, streamName, pollInterval, timeout)

        await printTopology(client, streamName, pollInterval, timeout)

    return plan


async def halveShardsCoroutine(
    client,
    streamName,
    pollInterval=DEFAULT_POLL_INTERVAL,
    timeout=None,
    oddShardPolicy=ODD_SHARD_POLICY_REJECT,
    dry=False,
):
    description = await fetchStableTopology(client, streamName, pollInterval, timeout)
    plan = computeMergePlan(streamName, description.shards, oddShardPolicy)

    if len(plan) == 0:
        logging.info(f'{streamName}: nothing to merge')
        return plan

    logging.info(f'{streamName}: merging {len(plan)} pairs of shards')

    for completed, (shard, adjacentShard) in enumerate(plan):
        if dry:
            printMergeCommand(streamName, shard, adjacentShard)
            continue

        logging.info(f'merge {shard.shard_id} with {adjacentShard.shard_id}')

        try:
            await client.merge_shards(
                streamName, shard.shard_id, adjacentShard.shard_id
            )
        except (ClientError, BotoCoreError) as e:
            step = f'merge of {shard.shard_id} with {adjacentShard.shard_id}'
            raise ReshardError(streamName, step, completed) from e

        print(f'Waiting for {streamName} to be active...')
        await waitForActive(client, streamName, pollInterval, timeout)

        await printTopology(client, streamName, pollInterval, timeout)

    return plan
