"""
API Endpoints
Routes for merging two uploaded images with Gemini
"""

import time
from flask import Blueprint, request, jsonify
from flask_cors import cross_origin
from werkzeug.exceptions import RequestEntityTooLarge

from merger import generate_merged_image
from merger.config import get_api_key, get_max_upload_bytes, get_standard_model, get_high_res_model
from merger.constants import ACCEPTED_IMAGE_TYPES, DEFAULT_ASPECT_RATIO, DEFAULT_QUALITY
from merger.models import AspectRatio, QualityTier, Failure, MissingCredentialError

from .models import create_error_response, create_success_response, CATEGORY_ERROR_CODES
from .utils import validate_image_file, format_processing_time, format_file_size

# Create API blueprint
api_bp = Blueprint('api', __name__, url_prefix='/api/v1')


@api_bp.route('/health', methods=['GET'])
@cross_origin()
def health_check():
    """
    Health check endpoint
    """
    return jsonify({
        'status': 'healthy',
        'timestamp': time.time(),
        'services': {
            'gemini_api_key': get_api_key() is not None,
        }
    })


@api_bp.route('/options', methods=['GET'])
@cross_origin()
def get_options():
    """
    Choices and limits the merge form offers
    """
    return jsonify({
        'success': True,
        'aspect_ratios': [ratio.value for ratio in AspectRatio],
        'qualities': [tier.value for tier in QualityTier],
        'defaults': {
            'aspect_ratio': DEFAULT_ASPECT_RATIO,
            'quality': DEFAULT_QUALITY,
        },
        'models': {
            QualityTier.STANDARD.value: get_standard_model(),
            QualityTier.HIGH.value: get_high_res_model(),
        },
        'accepted_image_types': ACCEPTED_IMAGE_TYPES,
        'max_file_size_bytes': get_max_upload_bytes(),
    })


@api_bp.route('/merge', methods=['POST'])
@cross_origin()
def merge():
    """
    Merge two uploaded images into one

    Request parameters (multipart/form-data):
    - image_a: First image file (JPG, PNG or WEBP)
    - image_b: Second image file
    - prompt: Description of how to merge the images
    - aspect_ratio: One of 1:1, 16:9, 9:16, 4:3, 3:4 (default: 1:1)
    - quality: 'Standard' or 'High (2K)' (default: Standard)
    """
    start_time = time.time()

    try:
        image_a_file = request.files.get('image_a')
        image_b_file = request.files.get('image_b')
        if not image_a_file or not image_a_file.filename or not image_b_file or not image_b_file.filename:
            return jsonify(create_error_response('VALIDATION_001', 'Please upload both images.')), 400

        prompt = request.form.get('prompt', '').strip()
        if not prompt:
            return jsonify(create_error_response('VALIDATION_001', 'Please describe how to merge the images.')), 400

        try:
            aspect_ratio = AspectRatio.parse(request.form.get('aspect_ratio'))
            quality = QualityTier.parse(request.form.get('quality'))
        except ValueError as e:
            return jsonify(create_error_response('VALIDATION_004', str(e))), 400

        images = []
        for label, image_file in (('Image A', image_a_file), ('Image B', image_b_file)):
            is_valid, error_msg, image = validate_image_file(image_file)
            if not is_valid:
                error_code = 'VALIDATION_003' if error_msg.startswith('File size too large') else 'VALIDATION_002'
                return jsonify(create_error_response(error_code, f'{label}: {error_msg}')), 400
            images.append(image)

        image_a, image_b = images
        print(f"📋 Merge request - prompt: {prompt[:50]}..., aspect_ratio: {aspect_ratio.value}, "
              f"quality: {quality.value}, sizes: {format_file_size(len(image_a.data))} + {format_file_size(len(image_b.data))}")

        outcome = generate_merged_image(
            image_a=image_a,
            image_b=image_b,
            prompt=prompt,
            aspect_ratio=aspect_ratio,
            quality=quality,
        )

        if isinstance(outcome, Failure):
            error_code = CATEGORY_ERROR_CODES[outcome.category]
            return jsonify(create_error_response(error_code, outcome.message, extra={
                'category': outcome.category.value,
                'model': outcome.model,
            })), 502

        return jsonify(create_success_response(
            message='Images merged successfully',
            image=outcome.image_data_uri,
            model=outcome.model,
            quality=outcome.tier.value if outcome.tier else None,
            fallback_used=outcome.fallback_used,
            processing_time=format_processing_time(start_time, time.time()),
            metadata={
                'requested_quality': quality.value,
                'aspect_ratio': aspect_ratio.value,
            },
        ))

    except RequestEntityTooLarge:
        # Rendered by the app-level 413 handler
        raise
    except MissingCredentialError as e:
        return jsonify(create_error_response('CONFIG_001', str(e))), 500
    except Exception as e:
        import traceback

        print("Error in merge:", e)
        print(traceback.format_exc())
        return jsonify(create_error_response('SERVICE_003', str(e))), 500
