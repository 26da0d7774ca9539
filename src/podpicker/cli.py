import argparse
import asyncio
import json
import sys
from uuid import uuid4

from dotenv import load_dotenv, find_dotenv
from kubernetes.client.rest import ApiException
from kubernetes.config import ConfigException
from urllib3.exceptions import HTTPError

from podpicker.chooser.registry import get_chooser, get_registered_modes
from podpicker.common.context import dispatch_id_ctx
from podpicker.common.errors import PodPickerError
from podpicker.common.logger import setup_logging
from podpicker.orchestrator.models import ReplicaGroup
from podpicker.orchestrator.pod_client import KubernetesPodClient


def _load_env():
    """
    Load environment variables for local/dev usage.
    In-cluster, env vars are injected externally.
    """
    load_dotenv(find_dotenv(usecwd=True), override=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="podpicker",
        description="Choose a worker pod from a Deployment's running replicas",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    choose = sub.add_parser("choose", help="Run one pod selection and print the result")
    choose.add_argument("--deployment", help="Deployment name (PODPICKER_DEPLOYMENT)")
    choose.add_argument("--namespace", help="Namespace (K8S_NAMESPACE)")
    choose.add_argument(
        "--loadbalance",
        choices=get_registered_modes(),
        help="Selection mode (PODPICKER_LOADBALANCE)",
    )
    choose.add_argument("--key", help="Sticky affinity key (PODPICKER_STICKY_KEY)")
    choose.add_argument("--kubeconfig", help="Path to kubeconfig (K8S_CONFIG_PATH)")
    choose.add_argument("--json", action="store_true", help="Print the result as JSON")
    return parser


async def run_choose(args, settings) -> dict:
    deployment = args.deployment or settings.deployment
    if not deployment:
        raise PodPickerError("a deployment name is required (--deployment or PODPICKER_DEPLOYMENT)")

    namespace = args.namespace or settings.k8s_namespace
    overrides = {"namespace": namespace}
    if args.kubeconfig:
        overrides["config_path"] = args.kubeconfig

    pod_client = KubernetesPodClient.from_settings(settings, **overrides)
    chooser = get_chooser(
        args.loadbalance or settings.loadbalance,
        pod_client=pod_client,
        group=ReplicaGroup(name=deployment, namespace=namespace),
        key=args.key or settings.sticky_key,
    )

    dispatch_id_ctx.set(uuid4().hex[:12])
    result = await chooser.choose()
    return result.to_dict()


def print_result(result: dict, as_json: bool = False):
    if as_json:
        print(json.dumps(result, indent=2))
        return

    print(f"chosen: {result['chosen']['name']}")
    for other in result["others"]:
        print(f"other:  {other['name']}")


def main(argv=None):
    _load_env()

    # Imported after the .env file is loaded so it is seen by the settings
    from podpicker.config import settings

    setup_logging(
        level=settings.log_level,
        service_name=settings.app_name,
        use_json=settings.log_json,
        log_file=settings.log_file,
    )

    args = build_parser().parse_args(argv)

    try:
        if args.command == "choose":
            result = asyncio.run(run_choose(args, settings))
            print_result(result, as_json=args.json)
    except (PodPickerError, ValueError) as e:
        print(f"[podpicker] Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ApiException as e:
        print(f"[podpicker] Kubernetes API error: {e.status} {e.reason}", file=sys.stderr)
        sys.exit(1)
    except ConfigException as e:
        print(f"[podpicker] Kubernetes config error: {e}", file=sys.stderr)
        sys.exit(1)
    except (HTTPError, OSError) as e:
        print(f"[podpicker] Kubernetes API unreachable: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
