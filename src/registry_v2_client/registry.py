"""Async functional registry operations."""

from typing import Any

from .core.registry_client import RegistryClient
from .core.types import RequestResult


async def check_registry_connectivity(
    host: str,
    use_tls: bool = False,
    username: str | None = None,
    password: str | None = None,
    timeout: float = 10,
) -> bool:
    """레지스트리 연결 상태를 확인합니다.

    Args:
        host: 레지스트리 호스트 (예: "registry.test.lan", "localhost:15000")
        use_tls: HTTPS 사용 여부 (기본값: False)
        username: 토큰 발급에 사용할 사용자 이름
        password: 토큰 발급에 사용할 비밀번호
        timeout: 요청 타임아웃 (초, 기본값: 10초)

    Returns:
        bool: /v2/ 가 2xx 로 응답하면 True

    Raises:
        RegistryAuthError: 인증 과정이 실패한 경우
    """
    async with RegistryClient(
        host, use_tls, username, password, timeout
    ) as client:
        return await client.check_connectivity()


async def perform_request(
    host: str,
    path: str = "",
    method: str = "GET",
    use_tls: bool = False,
    username: str | None = None,
    password: str | None = None,
    timeout: float = 10,
) -> RequestResult:
    """/v2/<path> 로 요청을 보내고 응답을 그대로 반환합니다.

    401 응답을 받으면 Bearer 토큰을 발급받아 한 번만 재시도합니다.

    Args:
        host: 레지스트리 호스트
        path: /v2/ 아래 경로 (빈 문자열이면 /v2/ 자체)
        method: HTTP 메서드 (기본값: "GET")
        use_tls: HTTPS 사용 여부
        username: 토큰 발급에 사용할 사용자 이름
        password: 토큰 발급에 사용할 비밀번호
        timeout: 요청 타임아웃 (초)

    Returns:
        RequestResult: 마지막 시도의 응답

    Raises:
        NoBearerRealmError: 401 응답에 Bearer realm 이 없는 경우
        CredentialsMissingError: 인증이 필요한데 자격 증명이 없는 경우
        AuthorizationError: 토큰 발급 또는 재시도가 거부된 경우

    Examples:
        result = await perform_request("registry.test.lan")
        print(result.status_code)
    """
    async with RegistryClient(
        host, use_tls, username, password, timeout
    ) as client:
        return await client.perform(path, method)


async def get_manifest(
    host: str,
    repository: str,
    tag: str,
    use_tls: bool = False,
    username: str | None = None,
    password: str | None = None,
    timeout: float = 10,
) -> dict[str, Any]:
    """이미지의 매니페스트를 조회합니다.

    Args:
        host: 레지스트리 호스트
        repository: 저장소 이름 (예: "busybox", "foo/busybox")
        tag: 태그 이름 (예: "latest", "1.0.0")
        use_tls: HTTPS 사용 여부
        username: 토큰 발급에 사용할 사용자 이름
        password: 토큰 발급에 사용할 비밀번호
        timeout: 요청 타임아웃 (초)

    Returns:
        dict[str, Any]: 매니페스트 딕셔너리

    Raises:
        NotFoundError: 저장소 또는 태그가 없는 경우
        RegistryProtocolError: 그 밖의 오류 응답

    Examples:
        manifest = await get_manifest("registry.test.lan", "foo/busybox", "1.0.0")
        print(manifest["name"], manifest["tag"])
    """
    async with RegistryClient(
        host, use_tls, username, password, timeout
    ) as client:
        return await client.manifest(repository, tag)


async def list_tags(
    host: str,
    repository: str,
    use_tls: bool = False,
    username: str | None = None,
    password: str | None = None,
    timeout: float = 10,
) -> list[str]:
    """특정 저장소의 모든 태그 목록을 조회합니다.

    Returns:
        list[str]: 태그 이름 목록 (예: ["latest", "1.0.0"])

    Raises:
        NotFoundError: 저장소가 없는 경우
    """
    async with RegistryClient(
        host, use_tls, username, password, timeout
    ) as client:
        return await client.list_tags(repository)


async def get_catalog(
    host: str,
    use_tls: bool = False,
    username: str | None = None,
    password: str | None = None,
    timeout: float = 10,
) -> list[dict[str, Any]]:
    """레지스트리의 모든 저장소와 태그를 조회합니다.

    Returns:
        list[dict[str, Any]]: {"name": 저장소, "tags": [...]} 목록 (카탈로그 순서)

    Raises:
        NotFoundError: 레지스트리가 /v2/_catalog 를 지원하지 않는 경우

    Examples:
        for entry in await get_catalog("registry.test.lan", username="portus", password="..."):
            print(entry["name"], entry["tags"])
    """
    async with RegistryClient(
        host, use_tls, username, password, timeout
    ) as client:
        return await client.catalog()


async def delete_blob(
    host: str,
    repository: str,
    digest: str,
    use_tls: bool = False,
    username: str | None = None,
    password: str | None = None,
    timeout: float = 10,
) -> bool:
    """digest 로 blob 을 삭제합니다.

    Returns:
        bool: 삭제 성공 시 True

    Raises:
        NotFoundError: blob 이 없거나 (BLOB_UNKNOWN) 삭제가 비활성화된 경우 (UNSUPPORTED)
        RegistryProtocolError: 그 밖의 오류 응답

    Note:
        레지스트리에서 REGISTRY_STORAGE_DELETE_ENABLED=true 설정이 필요합니다.
    """
    async with RegistryClient(
        host, use_tls, username, password, timeout
    ) as client:
        return await client.delete(repository, digest)
