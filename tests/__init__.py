# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Test suite for bytehist.

- test_core: histogram, loader, configuration and failure records
- test_cli: the bytehist command end to end
"""
