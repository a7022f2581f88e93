'''Copyright (c) 2020 Machine Zone, Inc. All rights reserved.'''

VERSION = '1.0.0'
