"""테스트 픽스처 데이터 패키지."""
