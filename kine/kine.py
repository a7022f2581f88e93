'''Synchronous entry points to the resharding coroutines

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.
'''

import asyncio

from kine.client import KinesisClient
from kine.cluster.report import printTopology
from kine.cluster.reshard import doubleShardsCoroutine, halveShardsCoroutine
from kine.cluster.topology import fetchStableTopology
from kine.config import KineConfig


class Kine:
    def __init__(self, config: KineConfig = None, client: KinesisClient = None):
        if config is None:
            config = KineConfig()

        if client is None:
            client = KinesisClient(config)

        self.config = config
        self.client = client

    @property
    def kinesis(self):
        '''The underlying boto3 kinesis client'''
        return self.client.kinesis

    def describeTopology(self, streamName):
        return asyncio.run(
            fetchStableTopology(
                self.client, streamName, self.config.poll_interval, self.config.timeout
            )
        )

    def doubleShards(self, streamName, dry=False):
        return asyncio.run(
            doubleShardsCoroutine(
                self.client,
                streamName,
                self.config.poll_interval,
                self.config.timeout,
                dry,
            )
        )

    def halveShards(self, streamName, dry=False):
        return asyncio.run(
            halveShardsCoroutine(
                self.client,
                streamName,
                self.config.poll_interval,
                self.config.timeout,
                self.config.odd_shard_policy,
                dry,
            )
        )

    def viewTopology(self, streamName):
        return asyncio.run(
            printTopology(
                self.client, streamName, self.config.poll_interval, self.config.timeout
            )
        )
