from banana_adapter.api.main import main

main()
