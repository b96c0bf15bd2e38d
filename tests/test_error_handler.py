from src.error_handler import BadRequestError, ErrorHandler, InternalError, NotFoundError, UpstreamError


def test_handle_known_errors_keep_status_and_message():
    eh = ErrorHandler()

    assert eh.to_response(BadRequestError("Missing skuCode")) == (400, {"error": "Missing skuCode"})
    assert eh.to_response(NotFoundError("Product not found")) == (404, {"error": "Product not found"})
    assert eh.to_response(UpstreamError("Failed to fetch review list", detail={"url": "x"})) == (
        500,
        {"error": "Failed to fetch review list"},
    )
    assert eh.to_response(InternalError("Failed to fetch image reviews"))[0] == 500


def test_unexpected_exception_uses_fallback_message():
    eh = ErrorHandler()
    status, body = eh.to_response(RuntimeError("boom"), fallback_message="Failed to fetch device reviews")

    assert status == 500
    assert body == {"error": "Failed to fetch device reviews"}
    assert "boom" not in body["error"]
