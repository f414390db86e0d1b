# app.py (Twisted Soul mint API)

import functools

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from errors import InfrastructureError, ValidationError
from issuance import issue
from ledger import SolanaLedger
from settings import Settings, configure_logging
from token_manifest import validate
from wallet import keypair_from_base58, load_keypair

PROTOCOL = "Twisted Soul"


def load_signer(settings):
    # SECRET_KEY (base58) wins over the key file, handy on hosted deploys
    if settings.secret_key:
        return keypair_from_base58(settings.secret_key)
    try:
        return load_keypair(settings.wallet_path)
    except FileNotFoundError:
        raise ValueError("SECRET_KEY not set and no wallet file found! Run generate_wallet.py first.") from None


def create_app(settings=None, signer=None, ledger_factory=None):
    settings = settings or Settings.from_env()
    network = settings.network_context()
    signer = signer or load_signer(settings)
    if ledger_factory is None:
        ledger_factory = functools.partial(SolanaLedger, timeout=settings.rpc_timeout)

    app = Flask(__name__)
    CORS(app)
    if settings.behind_proxy:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    app.logger.info(f"Mint API on {network.name} with wallet {signer.pubkey()}")

    @app.route("/", methods=["GET"])
    def status():
        return jsonify({
            "protocol": PROTOCOL,
            "network": network.name,
            "status": "online",
            "message": f"{PROTOCOL} backend is alive.",
        })

    @app.route("/api/mint", methods=["POST"])
    def mint():
        data = request.get_json(silent=True)
        app.logger.info(f"Mint request body: {data}")

        try:
            config = validate(data)
            ledger = ledger_factory(network)
            result = issue(ledger, signer, config, network, decimals=settings.decimals)
        except ValidationError as e:
            return jsonify({"ok": False, "error": str(e)}), 400
        except InfrastructureError as e:
            app.logger.error(f"Mint failed ({e.kind.value}): {e}")
            body = {"ok": False, "error": str(e), "kind": e.kind.value}
            if e.partial:
                body["mintAddress"] = e.mint_address
                body["tokenAccount"] = e.token_account
            return jsonify(body), 500
        except Exception:
            app.logger.exception("Mint error")
            return jsonify({"ok": False, "error": "Unknown server error in backend."}), 500

        return jsonify({"ok": True, "result": result.to_dict()})

    return app


def main():
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = create_app(settings)
    app.run(host="0.0.0.0", port=settings.port)


# --- Main Server Run ---
if __name__ == "__main__":
    main()
