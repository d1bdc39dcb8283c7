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

from blockdrv.common import i18n
from blockdrv.tests.unit.common import base


class TestI18n(base.BlockdrvTestCase):

    def test_translate_marker(self):
        self.assertEqual('Internal error happened',
                         str(i18n._('Internal error happened')))

    def test_only_marker_exported(self):
        self.assertFalse(hasattr(i18n, 'translate'))
        self.assertFalse(hasattr(i18n, 'get_available_languages'))
