#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QR Layout Viewer - Flask Web Application

- Pick a version (QR 1-40 or Micro QR 41-44) and a view.
- Render: blank symbol, debug view (codeword blocks shaded in placement
  order) or zone view (finder / timing / alignment colored).
- Metrics: width, compact flag, alignment anchors and centers, module and
  block counts.

Run:
    python app.py
Open:
    http://127.0.0.1:5000/
"""

import logging
from io import BytesIO
from typing import Tuple

from flask import Flask, render_template_string, request, send_file

from qr_layout import QrSymbol
from qr_layout.geometry import MAX_VERSION, MIN_VERSION
from qr_layout.renderer import (
    DEFAULT_BORDER,
    DEFAULT_SCALE,
    PALETTE,
    VIEWS,
    image_to_png_b64,
    image_to_png_bytes,
    render_debug_svg,
    render_image,
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TEMPLATE = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>QR Layout Viewer</title>
  <style>
    body{font-family:Inter, Arial, sans-serif; padding:18px; background:#fff; color:#222}
    .row{display:flex; flex-wrap:wrap; gap:16px; align-items:flex-end}
    .field{display:flex; flex-direction:column; font-size:14px}
    select, input[type="number"]{padding:6px 8px; font-family:monospace; border:1px solid #ccc; border-radius:6px}
    label{font-weight:600; margin-bottom:4px}
    button{padding:10px 16px; border-radius:8px; border:1px solid #333; background:#111; color:#fff; cursor:pointer}
    .card{margin-top:18px; border:1px solid #ddd; border-radius:10px; padding:14px}
    img{display:block; margin:8px 0; border:1px solid #ccc; image-rendering:pixelated}
    .metrics{font-size:13px; color:#333; line-height:1.4}
    .sw{display:inline-block; width:18px; height:12px; border:1px solid #aaa; margin-right:8px}
    .error{color:#b00; font-weight:700}
  </style>
</head>
<body>
  <h1>QR Layout Viewer</h1>

  <form method="post">
    <div class="row">
      <div class="field">
        <label>Version</label>
        <select name="version">
          {% for v in range(min_version, max_version + 1) %}
            <option value="{{v}}" {% if version==v %}selected{% endif %}>{% if v > 40 %}M{{v - 40}}{% else %}v{{v}}{% endif %}</option>
          {% endfor %}
        </select>
      </div>

      <div class="field">
        <label>View</label>
        <select name="view">
          {% for v in views %}
            <option value="{{v}}" {% if view==v %}selected{% endif %}>{{v}}</option>
          {% endfor %}
        </select>
      </div>

      <div class="field">
        <label>Skip function patterns</label>
        <select name="skip">
          <option value="false" {% if not skip %}selected{% endif %}>False</option>
          <option value="true" {% if skip %}selected{% endif %}>True</option>
        </select>
      </div>

      <div class="field">
        <label>Quiet zone (modules)</label>
        <input type="number" name="border" min="0" max="{{max_border}}" step="1" value="{{border}}">
      </div>
    </div>

    <div class="row">
      <button type="submit">Render</button>
    </div>
  </form>

  {% if error %}
    <p class="error">{{error}}</p>
  {% endif %}

  {% if qr %}
    <div class="card">
      <strong>{{qr.label}}</strong> - {{qr.size}}x{{qr.size}} modules
      <img src="data:image/png;base64,{{qr.img_b64}}" width="400" alt="{{qr.label}}">
      <div class="metrics">
        Compact (Micro QR): {{'True' if qr.compact else 'False'}}<br>
        Timing line offset: {{qr.timing}}<br>
        Alignment anchors: {{qr.anchors}}<br>
        Alignment centers: {{qr.centers}}<br>
        Modules in encoding region: {{qr.modules}}<br>
        Codeword blocks: {{qr.blocks}} (last block: {{qr.last_block}} modules)
      </div>
      <a href="/export/png?version={{qr.version}}&view={{view}}&skip={{'true' if skip else 'false'}}&border={{border}}">PNG</a> |
      <a href="/export/svg?version={{qr.version}}&skip={{'true' if skip else 'false'}}&border={{border}}">SVG (debug)</a>
    </div>

    <div class="legend">
      <h3>Legend</h3>
      <div><span class="sw" style="background:rgb{{palette.finder}}"></span> Finder pattern</div>
      <div><span class="sw" style="background:rgb{{palette.timing}}"></span> Timing pattern</div>
      <div><span class="sw" style="background:rgb{{palette.alignment}}"></span> Alignment pattern</div>
      <div><span class="sw" style="background:rgb{{palette.reserved}}"></span> Light module inside a pattern</div>
      <div><span class="sw" style="background:rgb(64,64,64)"></span> Codeword block (shade cycles every 8 blocks)</div>
    </div>
  {% endif %}
</body>
</html>
"""

app = Flask(__name__)
app.config.update(
    DEFAULT_VERSION=2,
    SCALE=DEFAULT_SCALE,
    BORDER=DEFAULT_BORDER,
    MAX_BORDER=20,
)


def _read_params(req) -> Tuple[int, str, bool, int]:
    """Extract layout parameters from a Flask request; raises ValueError on bad input."""
    raw_version = (req.values.get('version') or str(app.config['DEFAULT_VERSION'])).strip()
    try:
        version = int(raw_version)
    except ValueError:
        raise ValueError(f"version must be an integer, got {raw_version!r}") from None

    view = (req.values.get('view') or 'debug').strip().lower()
    if view not in VIEWS:
        raise ValueError(f"unknown view {view!r}")

    skip = (req.values.get('skip') or 'false').strip().lower() == 'true'

    try:
        border = int(req.values.get('border') or app.config['BORDER'])
        if border < 0 or border > app.config['MAX_BORDER']:
            border = app.config['BORDER']
    except (ValueError, TypeError):
        border = app.config['BORDER']

    return version, view, skip, border


def _label(symbol: QrSymbol) -> str:
    if symbol.is_compact:
        return f"M{symbol.version - 40}"
    return f"v{symbol.version}"


@app.route('/', methods=['GET', 'POST'])
def index():
    version = app.config['DEFAULT_VERSION']
    view = 'debug'
    skip = False
    border = app.config['BORDER']
    qr_view = None
    error = None

    try:
        version, view, skip, border = _read_params(request)
        symbol = QrSymbol(version, skip_function_patterns=skip)
    except ValueError as ex:
        error = f"Could not build the layout: {ex}"
        logger.warning(f"Rejected layout parameters: {ex}")
        symbol = None

    if symbol is not None:
        logger.info(f"Rendering {view} view for version {symbol.version} (skip={skip})")
        img = render_image(symbol, view=view, scale=app.config['SCALE'], border=border)
        region = symbol.encoding_region
        qr_view = {
            'version': symbol.version,
            'label': _label(symbol),
            'size': symbol.width,
            'img_b64': image_to_png_b64(img),
            'compact': symbol.is_compact,
            'timing': symbol.timing_line_offset,
            'anchors': list(symbol.alignment_anchors),
            'centers': symbol.alignment_centers,
            'modules': symbol.module_count,
            'blocks': len(region),
            'last_block': len(region[-1]) if region else 0,
        }

    status = 400 if error else 200
    return render_template_string(
        TEMPLATE,
        version=version, view=view, skip=skip, border=border,
        min_version=MIN_VERSION, max_version=MAX_VERSION, max_border=app.config['MAX_BORDER'],
        views=VIEWS, palette=PALETTE, qr=qr_view, error=error
    ), status


def _symbol_from_request():
    version, view, skip, border = _read_params(request)
    return QrSymbol(version, skip_function_patterns=skip), view, border


@app.route('/export/png', methods=['GET'])
def export_png():
    try:
        symbol, view, border = _symbol_from_request()
    except ValueError as ex:
        logger.warning(f"Rejected PNG export: {ex}")
        return str(ex), 400

    img = render_image(symbol, view=view, scale=app.config['SCALE'], border=border)
    buf = BytesIO(image_to_png_bytes(img))
    return send_file(buf, as_attachment=True,
                     download_name=f'qr_layout_{_label(symbol)}_{view}.png',
                     mimetype='image/png')


@app.route('/export/svg', methods=['GET'])
def export_svg():
    try:
        symbol, _, border = _symbol_from_request()
    except ValueError as ex:
        logger.warning(f"Rejected SVG export: {ex}")
        return str(ex), 400

    svg_bytes = render_debug_svg(symbol, scale=app.config['SCALE'], border=border)
    return send_file(BytesIO(svg_bytes), as_attachment=True,
                     download_name=f'qr_layout_{_label(symbol)}_debug.svg',
                     mimetype='image/svg+xml')


if __name__ == "__main__":
    app.run(debug=True)
