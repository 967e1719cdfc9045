from .generate_all import main

main()
