'''Stream topology tools

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.

DescribeStream is paginated and eventually consistent. A shard list is
only trusted when every page of it was read while the stream was ACTIVE.
'''

import asyncio
import logging
import sys
import time

from kine.commands.stream import STREAM_STATUS_ACTIVE, isOpen
from kine.config import DEFAULT_POLL_INTERVAL
from kine.errors import StreamNotActiveTimeout
from kine.hash_key import parseHashKey


def showProgress():
    sys.stderr.write('.')
    sys.stderr.flush()


def checkTimeout(streamName, start, timeout):
    if timeout is not None and time.time() - start > timeout:
        raise StreamNotActiveTimeout(streamName, timeout)


async def fetchStableTopology(
    client, streamName, pollInterval=DEFAULT_POLL_INTERVAL, timeout=None
):
    '''Read all the shards of a stream, restarting from the first page
    every time the stream is seen in a state other than ACTIVE.
    '''
    start = time.time()

    shards = []
    exclusiveStartShardId = None

    while True:
        description = await client.describe_stream(streamName, exclusiveStartShardId)

        if description.status != STREAM_STATUS_ACTIVE:
            logging.info(
                f'{streamName} is {description.status}, '
                f'discarding {len(shards)} shards and reading again'
            )
            shards = []
            exclusiveStartShardId = None

            checkTimeout(streamName, start, timeout)
            showProgress()
            await asyncio.sleep(pollInterval)
            continue

        shards.extend(description.shards)

        if not description.has_more_shards or len(description.shards) == 0:
            break

        exclusiveStartShardId = description.shards[-1].shard_id
        logging.debug(f'{streamName}: next page after {exclusiveStartShardId}')

    logging.info(f'{streamName}: {len(shards)} shards')
    return description._replace(shards=shards, has_more_shards=False)


async def waitForActive(
    client, streamName, pollInterval=DEFAULT_POLL_INTERVAL, timeout=None
):
    '''Poll the stream summary until the stream is ACTIVE again'''
    start = time.time()

    while True:
        summary = await client.describe_stream_summary(streamName)
        if summary.status == STREAM_STATUS_ACTIVE:
            return summary

        checkTimeout(streamName, start, timeout)
        showProgress()
        await asyncio.sleep(pollInterval)


def endingHashKey(shard):
    return parseHashKey(shard.hash_key_range.end)


def filterOpenShards(shards, sort=False):
    '''Shards still accepting records, optionally in hash key order'''
    openShards = [shard for shard in shards if isOpen(shard)]

    if sort:
        openShards.sort(key=endingHashKey)

    return openShards
