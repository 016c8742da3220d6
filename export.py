from __future__ import annotations
import io
import os
import tempfile
from typing import Optional
from PIL import Image
from colors import hex_to_rgba, normalize_color
from renderer import Canvas, rasterize
from shapes import ShapeOptions

def encode_png(canvas: Canvas) -> bytes:
    # (height, width, 4) uint8 is read as RGBA
    image = Image.fromarray(canvas.get_rgba_buffer())
    stream = io.BytesIO()
    image.save(stream, format='PNG')
    return stream.getvalue()

def generate_shape_png(kind, width: int, height: int, color: str,
                       options: Optional[ShapeOptions] = None) -> bytes:
    # color is resolved before the canvas exists, a bad one never reaches the fill
    rgba = hex_to_rgba(normalize_color(color))
    canvas = rasterize(kind, width, height, rgba, options)
    return encode_png(canvas)

def atomic_write(path: str, data: bytes):
    directory = os.path.dirname(os.path.abspath(path))
    fd, temp_path = tempfile.mkstemp(prefix='.tmp_', dir=directory)
    try:
        with os.fdopen(fd, 'wb') as temp_file:
            temp_file.write(data)
        os.replace(temp_path, path)
    except BaseException:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise

def file_exists(path: str) -> bool:
    return os.path.exists(path)
