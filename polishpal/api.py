"""
PolishPal Flask API

Provides REST endpoints for proofreading text through a correction provider
and reporting the word-level changes it made.
"""

import time
import logging
from datetime import datetime
from flask import Flask, request, jsonify
from flask_cors import CORS
from jsonschema import validate, ValidationError

from polishpal import __version__
from polishpal.core import ChangeAnalyzer, annotations_to_dicts, summarize, POSITIONAL
from polishpal.providers import create_provider, ProviderError, ProviderUnavailableError
from polishpal.records import RecordStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_TEXT_LENGTH = 5000

TEXT_REQUIRED_MESSAGE = 'Text is required and must be a string'

ANALYZE_REQUEST_SCHEMA = {
    "type": "object",
    "properties": {
        "original": {"type": "string"},
        "corrected": {"type": "string"}
    },
    "required": ["original", "corrected"]
}


def build_proofread_schema(max_text_length):
    """Request schema for /api/proofread with the configured length cap."""
    return {
        "type": "object",
        "properties": {
            "text": {"type": "string", "minLength": 1, "maxLength": max_text_length}
        },
        "required": ["text"]
    }


class PolishPalAPI:
    """Flask API wrapper for PolishPal functionality."""

    def __init__(self, config=None, provider=None, record_store=None):
        """Initialize API with configuration and optional injected collaborators."""
        self.config = config or {}
        self.max_text_length = int(self.config.get('POLISHPAL_MAX_TEXT_LENGTH', DEFAULT_MAX_TEXT_LENGTH))
        self.proofread_schema = build_proofread_schema(self.max_text_length)
        self.analyzer = ChangeAnalyzer(alignment=self.config.get('POLISHPAL_ALIGNMENT', POSITIONAL))

        self.provider = provider or create_provider(
            name=self.config.get('POLISHPAL_PROVIDER', 'openai'),
            api_key=self.config.get('POLISHPAL_API_KEY'),
            model=self.config.get('POLISHPAL_MODEL'),
            base_url=self.config.get('OPENAI_BASE_URL'),
            fallback_to_mock=bool(self.config.get('POLISHPAL_FALLBACK_TO_MOCK'))
        )

        if record_store is not None:
            self.record_store = record_store
        elif self.config.get('POLISHPAL_DISABLE_RECORDS'):
            self.record_store = None
        else:
            self.record_store = RecordStore(self.config.get('POLISHPAL_RECORDS_DIR', 'records'))

        logger.info(f"PolishPal API initialized - provider: {self.provider.name}, "
                    f"alignment: {self.analyzer.alignment}, records: {self.record_store is not None}")

    def health_check(self):
        """Health check endpoint with component status."""
        components = {
            'correction_provider': self.provider.name,
            'provider_configured': self.provider.is_configured(),
            'record_store': 'enabled' if self.record_store is not None else 'disabled',
            'alignment': self.analyzer.alignment
        }

        return jsonify({
            'status': 'healthy' if self.provider.is_configured() else 'degraded',
            'timestamp': datetime.utcnow().isoformat(),
            'version': __version__,
            'components': components
        })

    def proofread(self):
        """Main proofreading endpoint."""
        data = request.get_json(silent=True)
        if data is None:
            return jsonify({'error': 'Request body must be JSON'}), 400

        try:
            validate(data, self.proofread_schema)
        except ValidationError as e:
            if e.validator == 'maxLength':
                return jsonify({'error': f'Text must be less than {self.max_text_length} characters'}), 400
            return jsonify({'error': TEXT_REQUIRED_MESSAGE}), 400

        text = data['text']
        start_time = time.time()

        try:
            corrected = self.provider.correct(text)
            analysis = self.analyzer.analyze(text, corrected)
        except ProviderUnavailableError as e:
            logger.error(f"Correction provider unavailable: {e}")
            return jsonify({'error': 'Service temporarily unavailable'}), 503
        except ProviderError as e:
            logger.error(f"Correction provider error: {e}")
            return jsonify({'error': 'AI service error'}), 502
        except Exception as e:
            logger.error(f"Proofreading error: {e}")
            return jsonify({'error': 'Failed to process text'}), 500

        statistics = summarize(analysis)
        statistics['processing_time'] = f"{time.time() - start_time:.3f}s"
        analysis_dicts = annotations_to_dicts(analysis)

        result = {
            'original': text,
            'corrected': corrected,
            'analysis': analysis_dicts,
            'statistics': statistics
        }

        if self.record_store is not None:
            try:
                result['recordId'] = self.record_store.save_record({
                    'originalText': text,
                    'correctedText': corrected,
                    'analysis': analysis_dicts,
                    'timestamp': datetime.utcnow().isoformat()
                })
            except OSError as e:
                logger.error(f"Could not save proofreading record: {e}")

        return jsonify(result)

    def analyze(self):
        """Diff two texts without calling the correction provider."""
        data = request.get_json(silent=True)
        if data is None:
            return jsonify({'error': 'Request body must be JSON'}), 400

        try:
            validate(data, ANALYZE_REQUEST_SCHEMA)
        except ValidationError as e:
            return jsonify({'error': f'Invalid request: {e.message}'}), 400

        analysis = self.analyzer.analyze(data['original'], data['corrected'])
        return jsonify({
            'analysis': annotations_to_dicts(analysis),
            'statistics': summarize(analysis)
        })

    def list_records(self):
        """Get all proofreading records, newest first."""
        if self.record_store is None:
            return jsonify([])
        try:
            return jsonify(self.record_store.get_all_records())
        except OSError as e:
            logger.error(f"Error fetching records: {e}")
            return jsonify({'error': 'Failed to fetch records'}), 500

    def get_record(self, record_id):
        """Get a specific record."""
        record = self.record_store.get_record(record_id) if self.record_store is not None else None
        if record is None:
            return jsonify({'error': 'Record not found'}), 404
        return jsonify(record)

    def delete_record(self, record_id):
        """Delete a specific record."""
        if self.record_store is None or not self.record_store.delete_record(record_id):
            return jsonify({'error': 'Record not found'}), 404
        return jsonify({'deleted': True, 'id': record_id})


def create_app(config=None, provider=None, record_store=None):
    """
    Create and configure the Flask application.

    Args:
        config: Dictionary of POLISHPAL_* settings (see app.py)
        provider: Optional CorrectionProvider, overrides POLISHPAL_PROVIDER
        record_store: Optional RecordStore, overrides POLISHPAL_RECORDS_DIR
    """
    app = Flask(__name__)
    config = config or {}
    app.config.update(config)

    CORS(app)

    api = PolishPalAPI(config, provider=provider, record_store=record_store)
    app.extensions['polishpal'] = api

    @app.route('/health')
    def health():
        """Health check endpoint."""
        return api.health_check()

    @app.route('/api/proofread', methods=['POST'])
    def proofread():
        """Proofread text and analyze the changes."""
        return api.proofread()

    @app.route('/api/analyze', methods=['POST'])
    def analyze():
        """Analyze changes between two given texts."""
        return api.analyze()

    @app.route('/api/records', methods=['GET'])
    def list_records():
        return api.list_records()

    @app.route('/api/records/<record_id>', methods=['GET'])
    def get_record(record_id):
        return api.get_record(record_id)

    @app.route('/api/records/<record_id>', methods=['DELETE'])
    def delete_record(record_id):
        return api.delete_record(record_id)

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'API route not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'error': 'Internal server error'}), 500

    return app
