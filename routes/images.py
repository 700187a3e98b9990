# routes/images.py
from flask import Blueprint, render_template, request, jsonify, send_file, url_for, current_app
from PIL import Image
import os, uuid
from utils.imaging import allowed, parse_sigma, pil_to_bytes, from_pil, to_pil
from filters.blur import apply_blur
from filters.sharpen import apply_sharpen
from filters.errors import InvalidParameterError

bp = Blueprint("images", __name__)

@bp.get("/")
def index():
    return render_template("index.html", default_sigma=current_app.config["DEFAULT_SIGMA"])

@bp.post("/upload")
def upload():
    if "image" not in request.files:
        return "No file part", 400
    f = request.files["image"]
    if f.filename == "" or not allowed(f.filename, current_app.config["ALLOWED_EXTS"]):
        return "Invalid file", 400

    ext = f.filename.rsplit(".", 1)[1].lower()
    file_id = f"{uuid.uuid4().hex}.{ext}"
    save_path = os.path.join(current_app.config["UPLOAD_DIR"], file_id)
    f.save(save_path)
    current_app.logger.info("uploaded %s as %s", f.filename, file_id)

    return jsonify({
        "ok": True,
        "filename": file_id,
        "url": url_for("static", filename=f"uploads/{file_id}")
    })

def _source_path(data):
    """
    source_filename (a previous result) wins over filename (an upload).
    -> (path, None) or (None, (message, status))
    """
    if data.get("source_filename"):
        filename, folder = data["source_filename"], current_app.config["RESULT_DIR"]
    else:
        filename, folder = data.get("filename"), current_app.config["UPLOAD_DIR"]

    if not filename or not allowed(filename, current_app.config["ALLOWED_EXTS"]):
        return None, ("Invalid filename", 400)
    # both folders are flat; refuse anything that walks out of them
    if os.path.basename(filename) != filename:
        return None, ("Invalid filename", 400)
    src_path = os.path.join(folder, filename)
    if not os.path.exists(src_path):
        return None, ("File not found", 404)
    return src_path, None

def _sigma_from(data):
    raw = data.get("sigma", current_app.config["DEFAULT_SIGMA"])
    sigma = parse_sigma(raw)
    if sigma > current_app.config["MAX_SIGMA"]:
        raise ValueError(f"sigma {sigma} above MAX_SIGMA")
    return sigma

def _run(op, src_path, data):
    """Load, filter in place, return (PIL result, suffix). Raises ValueError subclasses."""
    with Image.open(src_path) as pil_img:
        image = from_pil(pil_img)

    if op == "blur":
        sigma = _sigma_from(data)
        apply_blur(image, sigma, window=current_app.config["BLUR_WINDOW"])
        suffix = f"blur_s{sigma:.1f}"
    else:
        apply_sharpen(image)
        suffix = "sharpen"

    current_app.logger.info("%s applied to %dx%d image", op, image.width, image.height)
    return to_pil(image), suffix

def _store_result(out_pil, suffix):
    out_name = f"{suffix}_{uuid.uuid4().hex}.png"
    out_path = os.path.join(current_app.config["RESULT_DIR"], out_name)
    out_pil.save(out_path, format="PNG")
    current_app.logger.info("saved %s", out_name)
    return out_name

def _filter(op):
    """
    Preview: returns PNG blob
    Commit:  ?commit=1 -> stores the result and returns JSON {ok, result_url, result_filename};
             pass result_filename back as source_filename to keep filtering it
    """
    data = request.get_json(silent=True) or {}
    commit = request.args.get("commit", "0") == "1"
    src_path, err = _source_path(data)
    if err:
        return err

    try:
        out_pil, suffix = _run(op, src_path, data)
    except InvalidParameterError as e:
        current_app.logger.warning("rejected %s: %s", op, e)
        return str(e), 400
    except ValueError as e:
        current_app.logger.warning("rejected %s: %s", op, e)
        return "Invalid sigma", 400

    if not commit:
        return send_file(pil_to_bytes(out_pil, fmt="PNG"),
                         mimetype="image/png",
                         as_attachment=False,
                         download_name="preview.png")

    out_name = _store_result(out_pil, suffix)
    return jsonify({
        "ok": True,
        "result_url": url_for("static", filename=f"results/{out_name}"),
        "result_filename": out_name
    })

# -------- APPLY ENDPOINTS --------

@bp.post("/apply/blur")
def apply_blur_route():
    return _filter("blur")

@bp.post("/apply/sharpen")
def apply_sharpen_route():
    return _filter("sharpen")

# -------- SAVE --------

@bp.post("/save")
def save_result():
    """
    op: "blur" (with sigma) | "sharpen"
    Source is filename (uploads) or source_filename (results).
    """
    data = request.get_json(silent=True) or {}
    op = (data.get("op") or "").lower().strip()
    if op not in ("blur", "sharpen"):
        return "Unknown op", 400

    src_path, err = _source_path(data)
    if err:
        return err

    try:
        out_pil, suffix = _run(op, src_path, data)
    except InvalidParameterError as e:
        current_app.logger.warning("rejected %s: %s", op, e)
        return str(e), 400
    except ValueError as e:
        current_app.logger.warning("rejected %s: %s", op, e)
        return "Invalid sigma", 400

    out_name = _store_result(out_pil, suffix)
    return jsonify({
        "ok": True,
        "result_url": url_for("static", filename=f"results/{out_name}", _external=False)
    })
