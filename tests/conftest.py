'''Copyright (c) 2020 Machine Zone, Inc. All rights reserved.'''

import coloredlogs

coloredlogs.install(level='INFO')
