import pytest


@pytest.fixture
def transit_payload():
    return {
        "startDate": "2024-01-01",
        "endDate": "2024-01-31",
        "location": {"latitude": 6.9271, "longitude": 79.8612, "timezone": "Asia/Colombo"},
    }


def test_transit_events(client, auth_headers, transit_payload):
    response = client.post('/transit', json=transit_payload, headers=auth_headers)
    assert response.status_code == 200

    result = response.json
    assert result['startDate'] == '2023-12-31T18:30:00Z'
    # A date-only end covers the whole local day
    assert result['endDate'] == '2024-01-31T18:30:00Z'
    assert result['planets'] == ['Sun', 'Moon', 'Mercury', 'Venus', 'Mars', 'Jupiter', 'Saturn']

    transits = result['transits']
    assert transits
    utc_dates = [t['utcDate'] for t in transits]
    assert utc_dates == sorted(utc_dates)
    for event in transits:
        assert event['eventType'] in ('ingress', 'retrograde', 'direct', 'aspect')
        assert event['date'].endswith('+05:30')
        if event['eventType'] == 'aspect':
            assert event['aspect']['phase'] in ('formed', 'broken')
            assert event['aspect']['key'] in ('conjunction', 'sextile', 'square', 'trine', 'opposition')

    # The fake Moon changes sign every two to three days
    moon_ingresses = [t for t in transits if t['planet'] == 'Moon' and t['eventType'] == 'ingress']
    assert 10 <= len(moon_ingresses) <= 16


def test_transit_selected_planets(client, auth_headers, transit_payload):
    transit_payload['planets'] = ['Mars', 'Rahu', 'Mars']
    result = client.post('/transit', json=transit_payload, headers=auth_headers).json
    assert result['planets'] == ['Mars', 'Rahu']
    assert {t['planet'] for t in result['transits']} <= {'Mars', 'Rahu'}


def test_transit_timezone_from_coordinates(client, auth_headers, transit_payload):
    del transit_payload['location']['timezone']
    result = client.post('/transit', json=transit_payload, headers=auth_headers).json
    assert result['timezone'] == 'Asia/Colombo'


def test_transit_end_before_start(client, auth_headers, transit_payload):
    transit_payload['endDate'] = '2023-12-01'
    response = client.post('/transit', json=transit_payload, headers=auth_headers)
    assert response.status_code == 400
    assert response.json['error']['code'] == 'INVALID_RANGE'


def test_transit_range_too_long(client, auth_headers, transit_payload):
    transit_payload['endDate'] = '2026-01-01'
    response = client.post('/transit', json=transit_payload, headers=auth_headers)
    assert response.status_code == 400
    assert response.json['error']['code'] == 'INVALID_RANGE'


def test_transit_unknown_planet(client, auth_headers, transit_payload):
    transit_payload['planets'] = ['Pluto']
    response = client.post('/transit', json=transit_payload, headers=auth_headers)
    assert response.status_code == 400
    assert response.json['error']['code'] == 'VALIDATION_ERROR'


def test_transit_sinhala_names(client, auth_headers, transit_payload):
    transit_payload['language'] = 'si'
    transit_payload['planets'] = ['Sun']
    result = client.post('/transit', json=transit_payload, headers=auth_headers).json
    for event in result['transits']:
        assert event['planet'] == 'Sun'
        assert event['planetName'] == 'රවි'
        assert event['eventName'] != event['eventType']
