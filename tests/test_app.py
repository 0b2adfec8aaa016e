"""
Tests for the Flask host: form page, options and the calculate endpoint.
"""
import pytest


class TestCalculateEndpoint:
    def test_success(self, client, metric_profile):
        res = client.post('/calculate', json=metric_profile)
        assert res.status_code == 200

        data = res.get_json()
        assert data['success'] is True
        assert data['result']['bmi'] == 22.9
        assert data['result']['category'] == 'Normal weight'
        assert data['result']['calories'] == {'maintenance': 2009, 'lose': 1509, 'gain': 2509}
        assert data['result']['target_calories'] == 2009
        assert 'Your BMI Result' in data['html']

    def test_imperial(self, client):
        res = client.post('/calculate', json={'unit': 'imperial', 'weight': 155, 'feet': 5, 'inches': 9})
        assert res.status_code == 200
        assert res.get_json()['result']['bmi'] == 22.9

    def test_invalid_input_returns_400(self, client, metric_profile):
        metric_profile['weight'] = '0'
        res = client.post('/calculate', json=metric_profile)
        assert res.status_code == 400

        data = res.get_json()
        assert data['success'] is False
        assert data['error'] == {
            'title': 'Invalid Input',
            'description': 'Please enter valid positive numbers for weight and height.',
        }
        assert 'result' not in data

    def test_missing_body(self, client):
        res = client.post('/calculate', data='not json', content_type='text/plain')
        assert res.status_code == 400
        assert res.get_json()['success'] is False

    def test_overlong_field_is_rejected(self, client, metric_profile):
        # 32 characters would leave 1e31 kg of what is really 10 kg
        metric_profile['weight'] = '1' + '0' * 31 + 'e-30'
        res = client.post('/calculate', json=metric_profile)
        assert res.status_code == 400
        assert res.get_json()['error']['description'] == 'Please enter at most 32 characters per field.'

    @pytest.mark.parametrize("body", [[1, 2], 5, "x"])
    def test_non_object_body(self, client, body):
        res = client.post('/calculate', json=body)
        assert res.status_code == 400
        data = res.get_json()
        assert data['success'] is False
        assert data['error']['title'] == 'Invalid Input'

    def test_huge_values_are_rejected(self, client, metric_profile):
        metric_profile['weight'] = '9e307'
        res = client.post('/calculate', json=metric_profile)
        assert res.status_code == 400


class TestPages:
    def test_form_page(self, client):
        res = client.get('/')
        assert res.status_code == 200
        assert b'calculator-form' in res.data

    def test_options(self, client):
        data = client.get('/options').get_json()
        assert data['units'] == ['metric', 'imperial']
        assert data['genders'] == ['male', 'female']
        assert [lvl['value'] for lvl in data['activity_levels']] == [
            'sedentary', 'light', 'moderate', 'active', 'veryActive'
        ]
        assert data['activity_levels'][4]['multiplier'] == 1.9
        assert [g['value'] for g in data['goals']] == ['lose', 'maintain', 'gain']

    def test_health(self, client):
        assert client.get('/health').get_json() == {'status': 'ok'}

    def test_security_headers(self, client):
        res = client.get('/health')
        assert res.headers['X-Content-Type-Options'] == 'nosniff'
        assert 'Content-Security-Policy' in res.headers
