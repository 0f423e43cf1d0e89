"""FastAPI web application for npmmeta."""

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel

from core.errors import InvalidFormat, InvalidPackageMetadata, PackageNotFound, RegistryError
from core.parse_node import parse_package_json
from core.registry_client import NpmRegistryClient

app = FastAPI(
    title="npmmeta",
    description="Normalize npm package.json and registry metadata",
    version="0.1.0",
)

registry_client = NpmRegistryClient()


class ParseRequest(BaseModel):
    """Request model for normalizing a document."""
    content: str
    include_raw: bool = False


class ParseResponse(BaseModel):
    """Response model wrapping a normalized record."""
    shape: str
    record: dict


@app.get("/", response_class=HTMLResponse)
async def home():
    """Serve the main application page."""
    return get_index_html()


@app.get("/favicon.ico")
async def favicon():
    """Return a simple favicon to prevent 404 errors."""
    # Simple 1x1 transparent PNG
    favicon_data = (
        b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01'
        b'\x08\x02\x00\x00\x00\x90wS\xde\x00\x00\x00\tpHYs\x00\x00\x0b\x13\x00\x00'
        b'\x0b\x13\x01\x00\x9a\x9c\x18\x00\x00\x00\x12IDAT\x08\x1dc\xf8\x00\x00'
        b'\x00\x01\x00\x01u\x02\x81\xa3\x00\x00\x00\x00IEND\xaeB`\x82'
    )
    return Response(content=favicon_data, media_type="image/png")


@app.post("/api/parse", response_model=ParseResponse)
async def parse_document(request: ParseRequest):
    """Normalize a package.json or registry document given as text."""
    try:
        content = request.content.strip()
        if not content:
            raise HTTPException(status_code=400, detail="No content provided")

        record = parse_package_json(content)

        return ParseResponse(
            shape=record.shape,
            record=record.to_dict(include_raw=request.include_raw),
        )

    except HTTPException:
        # Re-raise HTTP exceptions (don't convert to 500)
        raise
    except (InvalidFormat, InvalidPackageMetadata) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error processing document: {str(e)}")


@app.post("/api/upload", response_model=ParseResponse)
async def upload_file(file: UploadFile = File(...)):
    """Upload and normalize a package.json file."""
    try:
        if not file.filename:
            raise HTTPException(status_code=400, detail="No file uploaded")

        content = await file.read()
        text_content = content.decode("utf-8")

        return await parse_document(ParseRequest(content=text_content))

    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File must be valid UTF-8 text")
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error processing file: {str(e)}")


@app.get("/api/packages/{package_name:path}", response_model=ParseResponse)
async def get_package(package_name: str, include_raw: bool = False):
    """Fetch a package from the registry and normalize it."""
    try:
        record = await registry_client.fetch_record(package_name)
        return ParseResponse(shape=record.shape, record=record.to_dict(include_raw=include_raw))

    except PackageNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RegistryError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except (InvalidFormat, InvalidPackageMetadata) as e:
        raise HTTPException(status_code=502, detail=f"Registry returned unusable metadata: {e}")


def get_index_html() -> str:
    """Return the main HTML page."""
    return """
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>npmmeta - Package Metadata</title>
        <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.0/dist/css/bootstrap.min.css" rel="stylesheet">
    </head>
    <body>
        <div class="container py-4">
            <div class="text-center mb-4">
                <h1 class="display-5 fw-bold text-primary">npmmeta</h1>
                <p class="lead text-muted">Package Metadata from package.json or the npm registry</p>
            </div>

            <div class="row">
                <div class="col-lg-6 mb-4">
                    <textarea id="documentInput" class="form-control font-monospace" rows="16"
                        placeholder='{"name": "my-package", "version": "1.0.0"}'></textarea>
                    <div class="input-group mt-3">
                        <input type="text" id="packageName" class="form-control" placeholder="or a package name, e.g. lodash" />
                        <button class="btn btn-outline-primary" onclick="fetchPackage()">Fetch</button>
                    </div>
                    <button class="btn btn-primary mt-3 w-100" onclick="parseDocument()">Normalize</button>
                </div>
                <div class="col-lg-6 mb-4">
                    <pre id="result" class="bg-light p-3 border rounded"></pre>
                </div>
            </div>
        </div>

        <script>
            async function show(response) {
                const data = await response.json();
                document.getElementById('result').textContent = JSON.stringify(
                    response.ok ? data.record : data, null, 2
                );
            }

            async function parseDocument() {
                const content = document.getElementById('documentInput').value;
                await show(await fetch('/api/parse', {
                    method: 'POST',
                    headers: {'Content-Type': 'application/json'},
                    body: JSON.stringify({content})
                }));
            }

            async function fetchPackage() {
                const name = document.getElementById('packageName').value.trim();
                if (name) {
                    await show(await fetch('/api/packages/' + name));
                }
            }
        </script>
    </body>
    </html>
    """


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
