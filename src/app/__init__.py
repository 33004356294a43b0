"""
App layer: UI 서버 (FastAPI + HTMX).

역할:
- 이미지 업로드, 세션별 화면 상태 관리
- Gemini 호출 (providers), 결과 markdown 렌더링

주의: 폴더 구분
- src/app/templates/ → Jinja2 HTML (HTMX)
- src/app/static/ → CSS, JS (드래그 앤 드롭)
"""
