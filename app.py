# -*- coding: utf-8 -*-
import logging
import os

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException


def load_env():
    env_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), '.env')
    if os.path.exists(env_path):
        with open(env_path, encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#') and '=' in line:
                    key, val = line.split('=', 1)
                    os.environ.setdefault(key.strip(), val.strip())


load_env()

from saju_engine import SajuError, analyze_saju, analyze_solar_terms, get_four_pillars, get_preset  # noqa: E402
from saju_engine.adapters import get_adapter  # noqa: E402
from saju_engine.lunar import get_solar_date  # noqa: E402
from saju_engine.solar_terms import get_solar_terms_for_year  # noqa: E402

logging.basicConfig(
    level=os.environ.get('SAJU_LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = 'Asia/Seoul'
DEFAULT_LONGITUDE = 126.9780  # 서울

app = Flask(__name__)
CORS(app, origins=['*'])


def _settings():
    return {
        'timezone': os.environ.get('SAJU_TIMEZONE', DEFAULT_TIMEZONE),
        'longitude': float(os.environ.get('SAJU_LONGITUDE', DEFAULT_LONGITUDE)),
        'backend': os.environ.get('SAJU_DATE_BACKEND', 'zoneinfo'),
    }


def _birth_instant(adapter, data, timezone):
    """요청의 출생 정보 → 출생지 시각. 음력이면 양력으로 바꿉니다."""
    year, month, day = int(data['year']), int(data['month']), int(data['day'])
    if data.get('is_lunar', False):
        solar = get_solar_date(year, month, day, bool(data.get('is_leap_month', False)))
        year, month, day = solar.year, solar.month, solar.day
    hour = int(data.get('hour', 0))
    minute = int(data.get('minute', 0))
    return adapter.create_local(year, month, day, hour, minute, 0, zone=timezone)


def _chart_options(adapter, dt_local, data, settings):
    """tz_offset_hours 가 없으면 출생 시각의 실제 UTC 오프셋(서머타임 포함)을 씁니다."""
    if 'tz_offset_hours' in data:
        tz_offset = float(data['tz_offset_hours'])
    else:
        tz_offset = adapter.get_utc_offset_hours(dt_local)
    return {
        'longitude_deg': float(data.get('longitude', settings['longitude'])),
        'tz_offset_hours': tz_offset,
        'preset': get_preset(data.get('preset', 'standard')),
    }


@app.errorhandler(SajuError)
@app.errorhandler(KeyError)
@app.errorhandler(ValueError)
def bad_request(e):
    if isinstance(e, KeyError):
        message = f'missing or unknown value: {e.args[0]}'
    else:
        message = str(e)
    logger.info('rejected request to %s: %s', request.path, message)
    return jsonify({'error': message}), 400


@app.errorhandler(Exception)
def server_error(e):
    if isinstance(e, HTTPException):
        return e
    logger.exception('unhandled error on %s', request.path)
    return jsonify({'error': str(e)}), 500


@app.route('/api/saju', methods=['POST'])
def get_saju():
    data = request.get_json(force=True)
    settings = _settings()
    timezone = data.get('timezone', settings['timezone'])
    adapter = get_adapter(settings['backend'])

    yearly_range = None
    if 'yearly_from' in data and 'yearly_to' in data:
        yearly_range = (int(data['yearly_from']), int(data['yearly_to']))

    birth = _birth_instant(adapter, data, timezone)
    result = analyze_saju(
        adapter,
        birth,
        gender=data.get('gender'),
        yearly_luck_range=yearly_range,
        **_chart_options(adapter, birth, data, settings),
    )
    return jsonify(result.to_dict(adapter))


@app.route('/api/pillars', methods=['POST'])
def get_pillars():
    data = request.get_json(force=True)
    settings = _settings()
    timezone = data.get('timezone', settings['timezone'])
    adapter = get_adapter(settings['backend'])

    birth = _birth_instant(adapter, data, timezone)
    four = get_four_pillars(adapter, birth, **_chart_options(adapter, birth, data, settings))
    return jsonify(four.to_dict())


@app.route('/api/solar-terms', methods=['POST'])
def get_solar_terms():
    """month/day 가 있으면 그 시각의 절기 정보, 없으면 한 해의 24절기 목록"""
    data = request.get_json(force=True)
    settings = _settings()
    timezone = data.get('timezone', settings['timezone'])
    adapter = get_adapter(settings['backend'])

    if 'month' in data and 'day' in data:
        info = analyze_solar_terms(_birth_instant(adapter, data, timezone), adapter)
        return jsonify(info.to_dict(adapter))

    year = int(data['year'])
    terms = get_solar_terms_for_year(year, adapter, timezone)
    return jsonify({
        'year': year,
        'timezone': timezone,
        'terms': [t.to_dict(adapter) for t in terms],
    })


@app.route('/api/health', methods=['GET'])
def health():
    settings = _settings()
    return jsonify({'status': 'ok', 'date_backend': settings['backend'], 'timezone': settings['timezone']})


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    app.run(host='0.0.0.0', port=port, debug=False)
