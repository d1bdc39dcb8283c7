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

from blockdrv.drivers import base as driver_base
from blockdrv.tests.unit.common import base


class TestDriverBase(base.BlockdrvTestCase):

    def test_init(self):
        params = {'auth_url': 'http://keystone', 'extra': {'k': 'v'}}

        drv = driver_base.DriverBase(params)

        self.assertEqual(params, drv.conn_params)
        self.assertIsNot(params['extra'], drv.conn_params['extra'])

    def test_storage_is_abstract(self):
        self.assertRaises(TypeError, driver_base.Storage)

    def test_storage_incomplete(self):
        class HalfStorage(driver_base.Storage):
            def get_volume(self, volume_id):
                return volume_id

        self.assertRaises(TypeError, HalfStorage)

    def test_storage_requires_status_wait(self):
        class NoWaitStorage(driver_base.Storage):
            def get_volume(self, volume_id):
                pass

            def create_volume(self, **attrs):
                pass

            def volumes(self, details=True, **query):
                pass

            def update_volume(self, volume_id, ignore_missing=True, **attrs):
                pass

            def delete_volume(self, volume_id, ignore_missing=True):
                pass

            def volume_id_from_name(self, name):
                pass

        self.assertRaises(TypeError, NoWaitStorage)

        class FullStorage(NoWaitStorage):
            def wait_for_volume_status(self, volume_id, status,
                                       failures=None, interval=2, wait=120):
                pass

        self.assertIsInstance(FullStorage(), driver_base.Storage)
