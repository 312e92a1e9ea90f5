import json
import tempfile
import unittest
from pathlib import Path
from fastapi.testclient import TestClient
from genie.api.api_run import app
from genie.api.context import build_context
from genie.domain.GroceryItem import CounterIds
from genie.events.Event_Bus import EventBus
from genie.events import web_observers
from genie.infra.Grocery_Repository import DEFAULT_STORAGE_KEY
from genie.infra.kv_store import MemoryKeyValueStore


class TestGroceryListAPI(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.plan_file = Path(self._tmp.name) / 'meal_plan.json'
        self.store = MemoryKeyValueStore()
        self._original = app.state.genie
        app.state.genie = build_context(
            kv_store=self.store,
            plan_path=self.plan_file,
            id_factory=CounterIds(),
            event_bus=EventBus(),
        )
        self.client = TestClient(app)

    def tearDown(self):
        app.state.genie = self._original
        web_observers.stop()
        self._tmp.cleanup()

    def _persisted(self):
        return json.loads(self.store.get(DEFAULT_STORAGE_KEY))

    def _plan_breakfast(self):
        resp = self.client.put('/api/meal-plan/2025-03-03/breakfast',
                               json={'name': 'Eggs on toast', 'ingredients': ['eggs', 'toast']})
        self.assertEqual(resp.status_code, 200)

    def test_empty_list(self):
        resp = self.client.get('/api/grocery-list')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['title'], 'Grocery List')
        self.assertEqual(data['items'], [])
        self.assertEqual(data['count'], 0)

    def test_add_toggle_remove(self):
        resp = self.client.post('/api/grocery-list/items', json={'name': '  milk '})
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json(), {'id': 'item-1', 'item': 'milk', 'isChecked': False})

        resp = self.client.post('/api/grocery-list/items/item-1/toggle')
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()['isChecked'])
        self.assertTrue(self._persisted()[0]['isChecked'])

        resp = self.client.delete('/api/grocery-list/items/item-1')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['items'], [])
        self.assertEqual(self._persisted(), [])

    def test_blank_name_rejected(self):
        resp = self.client.post('/api/grocery-list/items', json={'name': '   '})
        self.assertEqual(resp.status_code, 422)

    def test_toggle_unknown_item(self):
        resp = self.client.post('/api/grocery-list/items/nope/toggle')
        self.assertEqual(resp.status_code, 404)

    def test_remove_unknown_item_is_noop(self):
        self.client.post('/api/grocery-list/items', json={'name': 'milk'})
        resp = self.client.delete('/api/grocery-list/items/nope')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['count'], 1)

    def test_sync_flow(self):
        self._plan_breakfast()
        self.client.post('/api/grocery-list/items', json={'name': 'stale bananas'})

        resp = self.client.post('/api/grocery-list/sync')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['state'], 'confirmation_pending')
        self.assertEqual(data['prompt']['title'], 'Sync Grocery List?')
        # Nothing replaced until confirmed
        self.assertEqual([i['item'] for i in self._persisted()], ['stale bananas'])

        resp = self.client.post('/api/grocery-list/sync/confirm')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['state'], 'idle')
        self.assertEqual([i['item'] for i in data['items']], ['eggs', 'toast'])
        self.assertEqual([i['item'] for i in self._persisted()], ['eggs', 'toast'])

    def test_sync_cancel(self):
        self._plan_breakfast()
        self.client.post('/api/grocery-list/items', json={'name': 'milk'})
        self.client.post('/api/grocery-list/sync')
        resp = self.client.post('/api/grocery-list/sync/cancel')
        self.assertEqual(resp.json(), {'state': 'idle'})
        self.assertEqual([i['item'] for i in self._persisted()], ['milk'])

    def test_confirm_without_request_conflicts(self):
        resp = self.client.post('/api/grocery-list/sync/confirm')
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(self.client.get('/api/grocery-list/sync').json(), {'state': 'idle'})

    def test_meal_plan_routes(self):
        self._plan_breakfast()
        resp = self.client.get('/api/meal-plan')
        self.assertEqual(resp.json()['recipe_count'], 1)
        resp = self.client.delete('/api/meal-plan/2025-03-03/breakfast')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['meals_by_day'], {})
        resp = self.client.delete('/api/meal-plan/2025-03-03/breakfast')
        self.assertEqual(resp.status_code, 404)
        resp = self.client.put('/api/meal-plan/not-a-date/lunch', json={'name': 'Soup'})
        self.assertEqual(resp.status_code, 422)

    def test_events_endpoint(self):
        with TestClient(app) as client:
            client.post('/api/grocery-list/items', json={'name': 'milk'})
            client.post('/api/grocery-list/sync')
            data = client.get('/api/events').json()
            types = [e['type'] for e in data['events']]
            self.assertEqual(types, ['grocery.list_changed', 'grocery.sync_state'])
            later = client.get('/api/events', params={'since': data['next_cursor']}).json()
            self.assertEqual(later['events'], [])
