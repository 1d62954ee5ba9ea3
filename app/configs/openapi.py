from litestar.openapi import OpenAPIConfig
from litestar.openapi.spec import Components, SecurityScheme

config = OpenAPIConfig(
    title="Roomhy API",
    version="1.0.0",
    description="Visit approval, owner KYC and property listing backend.",
    path="/schema",
    components=Components(
        security_schemes={
            "BearerToken": SecurityScheme(
                type="http",
                scheme="bearer",
                bearer_format="JWT",
            )
        }
    ),
    security=[{"BearerToken": []}],
)
