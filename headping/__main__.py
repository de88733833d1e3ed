from headping.main import main

main()
