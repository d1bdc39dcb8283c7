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

from blockdrv.common import consts
from blockdrv.common import metrics
from blockdrv.tests.unit.common import base


class TestMetrics(base.BlockdrvTestCase):

    def test_inc_request(self):
        before = self.metrics_snapshot()

        metrics.inc_request(consts.SERVICE_CINDER)

        self.assertMetricsDelta(before, 1, 0)

    def test_inc_failure(self):
        before = self.metrics_snapshot()

        metrics.inc_failure(consts.SERVICE_CINDER)

        self.assertMetricsDelta(before, 0, 1)

    def test_labels_are_separate(self):
        cinder = self.metrics_snapshot()
        nova = self.metrics_snapshot(service='nova')

        metrics.inc_request('nova')
        metrics.inc_failure('nova')

        self.assertMetricsDelta(cinder, 0, 0)
        self.assertMetricsDelta(nova, 1, 1, service='nova')

    def test_custom_provider(self):
        before = self.metrics_snapshot(provider='other')

        metrics.inc_request(consts.SERVICE_CINDER, provider='other')

        self.assertMetricsDelta(before, 1, 0, provider='other')
