# cli - 명령줄 진입점
