import io
import os
import types

from merchanza.modules.uploads import routes as upload_routes


def upload(client, filename="photo.png", content=b"\x89PNG fake"):
    return client.post(
        "/upload",
        data={"image": (io.BytesIO(content), filename)},
        content_type="multipart/form-data",
    )


def test_upload_and_serve(app, client):
    response = upload(client)

    assert response.status_code == 200
    assert response.json["success"] is True
    url = response.json["image_url"]
    assert url.startswith("http://localhost/images/image_")
    assert url.endswith(".png")

    served = client.get(url.replace("http://localhost", ""))
    assert served.status_code == 200
    assert served.data == b"\x89PNG fake"
    served.close()


def test_upload_without_file(client):
    response = client.post("/upload", data={"other": "field"})
    assert response.status_code == 400
    assert response.json["errors"] == "No file uploaded"


def test_upload_rejects_unknown_extension(client):
    response = upload(client, filename="script.sh")
    assert response.status_code == 400
    assert response.json["code"] == "validation_error"


def test_image_list(client):
    url = upload(client).json["image_url"]

    response = client.get("/imagelist")
    assert response.status_code == 200
    assert response.json["images"] == [url]


def test_image_list_unreadable_folder(app, client):
    os.rmdir(app.config["UPLOAD_FOLDER"])

    response = client.get("/imagelist")
    assert response.status_code == 500
    assert response.json["errors"] == "Unable to scan files"


def test_remove_image(app, client):
    filename = upload(client).json["image_url"].rsplit("/", 1)[1]

    response = client.post("/removeimage", json={"filename": filename})
    assert response.status_code == 200
    assert response.json["message"] == "Image deleted successfully"
    assert os.listdir(app.config["UPLOAD_FOLDER"]) == []


def test_remove_missing_image(client):
    response = client.post("/removeimage", json={"filename": "nope.png"})
    assert response.status_code == 404
    assert response.json["errors"] == "Failed to delete image"


def test_remove_image_cannot_escape_folder(app, client, tmp_path):
    outside = tmp_path / "keep.txt"
    outside.write_text("x")

    response = client.post("/removeimage", json={"filename": "../keep.txt"})
    assert response.status_code == 404
    assert outside.exists()


def test_uploads_in_same_millisecond_do_not_overwrite(app, client, monkeypatch):
    frozen_clock = types.SimpleNamespace(time=lambda: 1700000000.0)
    monkeypatch.setattr(upload_routes, "time", frozen_clock)

    first = upload(client, content=b"first").json["image_url"]
    second = upload(client, content=b"second").json["image_url"]

    assert first != second
    assert len(os.listdir(app.config["UPLOAD_FOLDER"])) == 2
    for url, content in ((first, b"first"), (second, b"second")):
        served = client.get(url.replace("http://localhost", ""))
        assert served.data == content
        served.close()
