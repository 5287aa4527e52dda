# Render routes dispatch on path alone; the method does not select the action
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def any_method_except(*excluded: str) -> list[str]:
    return [method for method in ANY_METHOD if method not in excluded]
