from flask import Blueprint, render_template

import config
from trails import TRAILS, trail_bounds

pages_bp = Blueprint('pages', __name__)


@pages_bp.route('/')
def index():
    return render_template(
        'index.html',
        trails=TRAILS,
        bounds=trail_bounds(TRAILS),
        refresh_ms=config.REFRESH_INTERVAL_MS,
    )
