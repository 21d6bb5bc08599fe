"""
HTTP client for the UMKM backend service
All pages talk to /api/sales, /api/predict and /api/profile through here
"""
import logging
import threading
from collections import defaultdict, deque
from datetime import datetime

import requests

from .errors import BackendError
from .models import BusinessProfile, PredictionResult, SalesRecord

logger = logging.getLogger(__name__)


class BackendClient:
    """Thin wrapper around requests with per-endpoint counters"""

    def __init__(self, base_url, timeout=10):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._lock = threading.Lock()
        self.metrics = defaultdict(lambda: {
            'requests': 0,
            'errors': 0,
            'last_call': None,
            'last_error': None,
            'error_log': deque(maxlen=50)
        })

    # Sales

    def list_sales(self, limit):
        """Fetch up to `limit` sales records, in the order the backend returns them"""
        data = self._request('GET', '/api/sales', params={'limit': int(limit)})
        if not isinstance(data, list):
            raise BackendError('Gagal memuat data penjualan', endpoint='/api/sales')
        return [SalesRecord.from_json(item) for item in data if isinstance(item, dict)]

    def create_sale(self, date, revenue, note=''):
        payload = {'date': date, 'revenue': revenue, 'note': note}
        return self._request('POST', '/api/sales', json=payload)

    # Forecast

    def predict(self, series, method, window, alpha=None):
        """Ask the backend for the next value of `series`

        alpha is only sent when given, the backend picks its own default otherwise.
        """
        payload = {'series': list(series), 'method': method, 'window': int(window)}
        if alpha is not None:
            payload['alpha'] = alpha
        data = self._request('POST', '/api/predict', json=payload)
        if not isinstance(data, dict) or 'predicted' not in data:
            raise BackendError('Respons prediksi tidak valid', endpoint='/api/predict')
        return PredictionResult.from_json(data)

    # Profile

    def list_profiles(self):
        data = self._request('GET', '/api/profile')
        if not isinstance(data, list):
            raise BackendError('Gagal memuat profil', endpoint='/api/profile')
        return [BusinessProfile.from_json(item) for item in data if isinstance(item, dict)]

    def create_profile(self, fields):
        return self._request('POST', '/api/profile', json=dict(fields))

    # Status

    def check_health(self):
        """Check if the backend answers at all. Never raises."""
        url = self.base_url + '/'
        try:
            response = requests.get(url, timeout=min(self.timeout, 3))
            return {
                'healthy': response.status_code < 500,
                'status_code': response.status_code,
                'url': url
            }
        except requests.exceptions.RequestException as e:
            return {
                'healthy': False,
                'error': str(e),
                'url': url
            }

    def get_metrics(self):
        """Snapshot of request/error counters per endpoint"""
        with self._lock:
            snapshot = {}
            for endpoint, m in self.metrics.items():
                snapshot[endpoint] = {
                    'requests': m['requests'],
                    'errors': m['errors'],
                    'error_rate': (m['errors'] / max(m['requests'], 1)) * 100,
                    'last_call': m['last_call'].isoformat() if m['last_call'] else None,
                    'last_error': m['last_error'],
                    'recent_errors': list(m['error_log'])
                }
        return {
            'base_url': self.base_url,
            'total_requests': sum(m['requests'] for m in snapshot.values()),
            'total_errors': sum(m['errors'] for m in snapshot.values()),
            'endpoints': snapshot
        }

    def _request(self, method, path, **kwargs):
        url = self.base_url + path
        self._record_call(path)
        logger.debug('%s %s %s', method, url, kwargs.get('params') or '')

        try:
            response = requests.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.Timeout:
            self._record_error(path, 'timeout')
            logger.warning('Backend timeout on %s %s', method, url)
            raise BackendError('Server tidak merespons (timeout)', endpoint=path)
        except requests.exceptions.RequestException as e:
            self._record_error(path, str(e))
            logger.warning('Backend unreachable on %s %s: %s', method, url, e)
            raise BackendError('Tidak dapat terhubung ke server', endpoint=path)

        if not response.ok:
            detail = self._error_detail(response)
            self._record_error(path, f'HTTP {response.status_code}: {detail}')
            logger.warning('Backend returned HTTP %s for %s %s: %s', response.status_code, method, url, detail)
            raise BackendError(
                f'Server mengembalikan HTTP {response.status_code}' + (f': {detail}' if detail else ''),
                status_code=response.status_code,
                endpoint=path
            )

        try:
            return response.json()
        except ValueError:
            self._record_error(path, 'invalid JSON')
            logger.warning('Backend sent invalid JSON for %s %s', method, url)
            raise BackendError('Respons server bukan JSON', status_code=response.status_code, endpoint=path)

    @staticmethod
    def _error_detail(response):
        try:
            body = response.json()
        except ValueError:
            return ''
        if isinstance(body, dict):
            detail = body.get('detail') or body.get('error') or body.get('message')
            return str(detail) if detail else ''
        return ''

    def _record_call(self, path):
        with self._lock:
            self.metrics[path]['requests'] += 1
            self.metrics[path]['last_call'] = datetime.now()

    def _record_error(self, path, message):
        with self._lock:
            m = self.metrics[path]
            m['errors'] += 1
            m['last_error'] = message
            m['error_log'].append({'timestamp': datetime.now().isoformat(), 'message': message})
