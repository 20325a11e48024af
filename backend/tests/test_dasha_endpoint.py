from datetime import datetime

import pytest

from iruastro import i18n


def parse(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.fixture
def dasha_payload():
    return {
        "dob": "1990-06-15",
        "time": "12:00",
        "location": {"latitude": 6.9271, "longitude": 79.8612},
        "timezone": "Asia/Colombo",
    }


def test_dasha_timeline(client, auth_headers, dasha_payload):
    response = client.post('/dasha', json=dasha_payload, headers=auth_headers)
    assert response.status_code == 200

    result = response.json
    main = result['mainDasha']
    assert len(main) == 9
    assert main[0]['start'] == result['date']
    assert main[0]['lord'] == result['metadata']['birthNakshatraLord']
    # First lord rules the Moon's birth nakshatra
    assert i18n.label('planet', main[0]['lord']) == result['moonNakshatra']['ruler']

    for maha in main:
        assert maha['generalOutcome']
        assert maha['prediction']
        assert len(maha['antardasha']) == 9
        assert maha['antardasha'][0]['start'] == maha['start']
        assert maha['antardasha'][-1]['end'] == maha['end']

    for previous, current in zip(main, main[1:]):
        assert previous['end'] == current['start']

    metadata = result['metadata']
    assert metadata['system'] == 'vimshottari'
    assert 0 < metadata['balanceYears'] <= 20


def test_dasha_active_period(client, auth_headers, dasha_payload):
    dasha_payload['atDate'] = '2024-03-25T04:16:00Z'
    result = client.post('/dasha', json=dasha_payload, headers=auth_headers).json
    at = parse(dasha_payload['atDate'])

    active = [m for m in result['mainDasha'] if m['active']]
    assert len(active) == 1
    assert parse(active[0]['start']) <= at < parse(active[0]['end'])

    active_antars = [a for a in active[0]['antardasha'] if a['active']]
    assert len(active_antars) == 1


def test_dasha_sinhala(client, auth_headers, dasha_payload):
    dasha_payload['language'] = 'si'
    result = client.post('/dasha', json=dasha_payload, headers=auth_headers).json
    first = result['mainDasha'][0]
    assert first['planet'] == i18n.label('planet', first['lord'], 'si')
    assert first['prediction'] == i18n.dasha_text(first['lord'], 'si')['prediction']


def test_dasha_invalid_at_date(client, auth_headers, dasha_payload):
    dasha_payload['atDate'] = 'yesterday'
    response = client.post('/dasha', json=dasha_payload, headers=auth_headers)
    assert response.status_code == 400
    assert any(e.startswith('atDate') for e in response.json['errors'])
