# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License. You may obtain
# a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.

import abc
import copy


class DriverBase(object):
    """Base class for all drivers."""

    def __init__(self, params):
        self.conn_params = copy.deepcopy(params)


class Storage(object, metaclass=abc.ABCMeta):
    """Interface of block storage drivers."""

    @abc.abstractmethod
    def get_volume(self, volume_id):
        """Get a single volume by its ID."""

    @abc.abstractmethod
    def create_volume(self, **attrs):
        """Create a volume from the given attributes."""

    @abc.abstractmethod
    def volumes(self, details=True, **query):
        """List all volumes matching the query."""

    @abc.abstractmethod
    def update_volume(self, volume_id, ignore_missing=True, **attrs):
        """Update a volume's attributes."""

    @abc.abstractmethod
    def delete_volume(self, volume_id, ignore_missing=True):
        """Delete a volume."""

    @abc.abstractmethod
    def volume_id_from_name(self, name):
        """Resolve a volume name to a unique volume ID."""

    @abc.abstractmethod
    def wait_for_volume_status(self, volume_id, status, failures=None,
                               interval=2, wait=120):
        """Wait until a volume reaches the given status."""
