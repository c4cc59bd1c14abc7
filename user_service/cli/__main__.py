from user_service.cli import main

main()
