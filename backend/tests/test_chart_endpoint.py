import pytest

from iruastro import i18n

CHART_PAYLOAD = {
    "dob": "1990-06-15",
    "time": "12:00",
    "location": {"latitude": 6.9271, "longitude": 79.8612},
    "timezone": "Asia/Colombo",
}

BODIES = {"Sun", "Moon", "Mercury", "Venus", "Mars", "Jupiter", "Saturn", "Rahu", "Ketu"}


def payload(**changes):
    data = dict(CHART_PAYLOAD)
    data.update(changes)
    return data


def test_healthz_endpoint(client):
    """Health check needs no token"""
    response = client.get('/healthz')
    assert response.status_code == 200
    assert response.json['ok'] is True


class TestAuthentication:
    def test_missing_token(self, client):
        response = client.post('/birthchart', json=CHART_PAYLOAD)
        assert response.status_code == 401
        assert response.json['error']['code'] == 'UNAUTHORIZED'
        assert response.json['message'] == i18n.message('unauthorized')

    def test_wrong_token(self, client):
        response = client.post('/birthchart', json=CHART_PAYLOAD,
                               headers={'Authorization': 'Bearer not-the-token'})
        assert response.status_code == 401

    def test_wrong_scheme(self, client):
        response = client.post('/birthchart', json=CHART_PAYLOAD,
                               headers={'Authorization': 'Basic dXNlcjpwYXNz'})
        assert response.status_code == 401

    @pytest.mark.parametrize('path', ['/birthchart', '/navamsha', '/yoga', '/transit', '/dasha'])
    def test_every_route_is_protected(self, client, path):
        response = client.post(path, json={})
        assert response.status_code == 401


class TestRequestErrors:
    def test_get_is_not_allowed(self, client, auth_headers):
        response = client.get('/birthchart', headers=auth_headers)
        assert response.status_code == 405
        assert response.json['error']['code'] == 'METHOD_NOT_ALLOWED'

    def test_unknown_route(self, client):
        response = client.get('/horoscope')
        assert response.status_code == 404

    def test_missing_fields(self, client, auth_headers):
        response = client.post('/birthchart', json={"time": "12:00"}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json['error']['code'] == 'VALIDATION_ERROR'
        errors = response.json['errors']
        assert any(e.startswith('dob') for e in errors)
        assert any(e.startswith('location') for e in errors)

    def test_latitude_out_of_range(self, client, auth_headers):
        data = payload(location={"latitude": 100.0, "longitude": 79.8})
        response = client.post('/birthchart', json=data, headers=auth_headers)
        assert response.status_code == 400
        assert any(e.startswith('location.latitude') for e in response.json['errors'])

    def test_bad_time_format(self, client, auth_headers):
        response = client.post('/birthchart', json=payload(time="noon"), headers=auth_headers)
        assert response.status_code == 400

    def test_time_with_offset_is_rejected(self, client, auth_headers):
        response = client.post('/birthchart', json=payload(time="12:00+05:30"), headers=auth_headers)
        assert response.status_code == 400
        assert response.json['error']['code'] == 'VALIDATION_ERROR'
        assert any(e.startswith('time') for e in response.json['errors'])

    def test_hour_only_time_is_rejected(self, client, auth_headers):
        response = client.post('/birthchart', json=payload(time="12"), headers=auth_headers)
        assert response.status_code == 400
        assert response.json['error']['code'] == 'VALIDATION_ERROR'

    def test_dasha_time_with_offset_is_rejected(self, client, auth_headers):
        response = client.post('/dasha', json=payload(time="12:00+05:30"), headers=auth_headers)
        assert response.status_code == 400
        assert response.json['error']['code'] == 'VALIDATION_ERROR'

    def test_unknown_timezone(self, client, auth_headers):
        response = client.post('/birthchart', json=payload(timezone="Mars/Olympus"), headers=auth_headers)
        assert response.status_code == 400

    def test_unsupported_language(self, client, auth_headers):
        response = client.post('/birthchart', json=payload(language="fr"), headers=auth_headers)
        assert response.status_code == 400

    def test_nonexistent_local_time(self, client, auth_headers):
        data = payload(dob="2023-03-12", time="02:30", timezone="America/New_York")
        response = client.post('/birthchart', json=data, headers=auth_headers)
        assert response.status_code == 400
        assert response.json['message'] == i18n.message('invalidDateTime')

    def test_body_not_json(self, client, auth_headers):
        response = client.post('/birthchart', data="dob=1990", headers=auth_headers)
        assert response.status_code == 400
        assert response.json['errors']

    def test_error_message_is_localized(self, client, auth_headers):
        data = payload(language="si", time="noon")
        response = client.post('/birthchart', json=data, headers=auth_headers)
        assert response.status_code == 400
        assert response.json['message'] == i18n.message('validationError', 'si')


class TestBirthChart:
    def test_basic_chart(self, client, auth_headers):
        response = client.post('/birthchart', json=CHART_PAYLOAD, headers=auth_headers)
        assert response.status_code == 200

        result = response.json
        assert result['date'] == '1990-06-15T06:30:00Z'
        assert result['timezone'] == 'Asia/Colombo'
        assert result['ayanamsa'] == pytest.approx(23.71, abs=0.01)
        assert set(result['planetaryPositions']) == BODIES

        for body, position in result['planetaryPositions'].items():
            assert 0 <= position['degree'] < 360
            assert 0 <= position['degreeInSign'] < 30
            assert 1 <= position['house'] <= 12
            assert 1 <= position['pada'] <= 4
            assert position['rashi'] == i18n.rashi_name(position['rashiIndex'])

        assert result['planetaryPositions']['Rahu']['dignity'] == 'Neutral'
        moon = result['moonNakshatra']
        assert 1 <= moon['pada'] <= 4
        assert set(moon['yoni']) == {'animal', 'gender'}

    def test_lagna_is_first_house(self, client, auth_headers):
        result = client.post('/birthchart', json=CHART_PAYLOAD, headers=auth_headers).json
        lagna_sign = result['lagna']['rashiIndex']
        for position in result['planetaryPositions'].values():
            assert position['house'] == (position['rashiIndex'] - lagna_sign) % 12 + 1

    def test_nodes_are_opposite(self, client, auth_headers):
        result = client.post('/birthchart', json=CHART_PAYLOAD, headers=auth_headers).json
        rahu = result['planetaryPositions']['Rahu']['degree']
        ketu = result['planetaryPositions']['Ketu']['degree']
        assert (ketu - rahu) % 360 == pytest.approx(180.0)

    def test_default_timezone(self, client, auth_headers):
        data = dict(CHART_PAYLOAD)
        del data['timezone']
        result = client.post('/birthchart', json=data, headers=auth_headers).json
        assert result['timezone'] == 'Asia/Colombo'
        assert result['date'] == '1990-06-15T06:30:00Z'

    def test_sinhala_labels(self, client, auth_headers):
        result = client.post('/birthchart', json=payload(language="si"), headers=auth_headers).json
        assert result['message'] == i18n.message('birthchart', 'si')
        sun = result['planetaryPositions']['Sun']
        assert sun['rashi'] in i18n.RASHI_NAMES['si']
        assert result['moonNakshatra']['nakshatra'] in i18n.NAKSHATRA_NAMES['si']

    def test_same_request_same_chart(self, client, auth_headers):
        first = client.post('/birthchart', json=CHART_PAYLOAD, headers=auth_headers).json
        second = client.post('/birthchart', json=CHART_PAYLOAD, headers=auth_headers).json
        assert first == second


class TestNavamsha:
    def test_navamsha_chart(self, client, auth_headers):
        response = client.post('/navamsha', json=CHART_PAYLOAD, headers=auth_headers)
        assert response.status_code == 200
        result = response.json
        positions = result['planetaryD9Positions']
        assert set(positions) == BODIES
        assert positions['Rahu']['rashiIndex'] == (positions['Ketu']['rashiIndex'] + 6) % 12
        assert positions['Ketu']['dignity'] == 'Neutral'
        for position in positions.values():
            assert 1 <= position['ordinal'] <= 9
            assert 0 <= position['degree'] < 30
        assert 0 <= result['d9Lagna']['rashiIndex'] <= 11


class TestYoga:
    def test_yoga_response(self, client, auth_headers):
        response = client.post('/yoga', json=CHART_PAYLOAD, headers=auth_headers)
        assert response.status_code == 200
        result = response.json
        assert isinstance(result['yogas'], list)
        for yoga in result['yogas']:
            assert {'key', 'name', 'description', 'significance', 'effect', 'strength', 'planets'} <= set(yoga)
            assert yoga['strength'] in ('Strong', 'Medium', 'Weak')
        assert set(result['planetaryPositions']) == BODIES | {'Ascendant'}
        assert set(result['planetaryZodiacSigns']) == BODIES | {'Ascendant'}

    def test_yoga_names_in_sinhala(self, client, auth_headers):
        result = client.post('/yoga', json=payload(language="si"), headers=auth_headers).json
        for yoga in result['yogas']:
            assert yoga['name'] == i18n.yoga_text(yoga['key'], 'si')['name']
